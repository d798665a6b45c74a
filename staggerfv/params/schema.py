"""Configuration schema with validation and YAML round-tripping. Units: meters, seconds."""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

from staggerfv.advection import available_schemes
from staggerfv.config import BACKENDS, init_taichi
from staggerfv.core.architectures import Architecture
from staggerfv.core.dtypes import to_taichi_dtype
from staggerfv.core.grid import RegularCartesianGrid


class ValidationError(ValueError):
    """Parameter validation failed."""
    pass


def _triple(value: Any, name: str, cast) -> tuple:
    try:
        triple = tuple(cast(v) for v in value)
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be a sequence of 3 numbers, got {value!r}") from None
    if len(triple) != 3:
        raise ValidationError(f"{name} must have 3 entries, got {value!r}")
    return triple


@dataclass(frozen=True)
class GridParams:
    """Grid: size (Nx, Ny, Nz), length (Lx, Ly, Lz) [m], halo (Hx, Hy, Hz), origin [m]."""
    size: tuple[int, int, int] = (16, 16, 16)
    length: tuple[float, float, float] = (1.0, 1.0, 1.0)
    halo: tuple[int, int, int] = (1, 1, 1)
    origin: tuple[float, float, float] | None = None

    def __post_init__(self) -> None:
        size = _triple(self.size, "size", int)
        length = _triple(self.length, "length", float)
        halo = _triple(self.halo, "halo", int)
        if any(n < 1 for n in size):
            raise ValidationError(f"size must be >= 1, got {size}")
        if any(L <= 0 for L in length):
            raise ValidationError(f"length must be positive, got {length}")
        if any(h < 0 for h in halo):
            raise ValidationError(f"halo must be non-negative, got {halo}")
        object.__setattr__(self, "size", size)
        object.__setattr__(self, "length", length)
        object.__setattr__(self, "halo", halo)
        if self.origin is not None:
            object.__setattr__(self, "origin", _triple(self.origin, "origin", float))

    @property
    def n_cells(self) -> int:
        return self.size[0] * self.size[1] * self.size[2]


@dataclass(frozen=True)
class RuntimeParams:
    """Runtime: architecture ('cpu'/'gpu'), backend, precision, debug."""
    architecture: str = "cpu"
    backend: str = "auto"
    precision: str = "float64"
    debug: bool = False

    def __post_init__(self) -> None:
        try:
            Architecture.from_name(self.architecture)
        except ValueError as e:
            raise ValidationError(str(e)) from None
        if self.backend != "auto" and self.backend not in BACKENDS:
            raise ValidationError(
                f"backend must be 'auto' or one of {BACKENDS}, got {self.backend!r}"
            )
        if self.precision not in ("float32", "float64"):
            raise ValidationError(
                f"precision must be 'float32' or 'float64', got {self.precision!r}"
            )

    @property
    def arch(self) -> Architecture:
        return Architecture.from_name(self.architecture)

    @property
    def float_type(self):
        return to_taichi_dtype(self.precision)


@dataclass(frozen=True)
class CoreConfig:
    """Complete configuration of the discretization core."""

    grid: GridParams = field(default_factory=GridParams)
    runtime: RuntimeParams = field(default_factory=RuntimeParams)
    advection: str = "centered_second_order"

    def __post_init__(self) -> None:
        if self.advection not in available_schemes():
            raise ValidationError(
                f"Unknown advection scheme {self.advection!r}. "
                f"Available: {available_schemes()}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to nested dictionary of plain (YAML-safe) values."""
        grid = {
            k: list(v) if isinstance(v, tuple) else v
            for k, v in asdict(self.grid).items()
        }
        return {
            "grid": grid,
            "runtime": asdict(self.runtime),
            "advection": self.advection,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CoreConfig":
        """Create from nested dictionary."""
        unknown = set(data) - {"grid", "runtime", "advection"}
        if unknown:
            raise ValidationError(f"Unknown configuration keys: {sorted(unknown)}")
        kwargs: dict[str, Any] = {}
        try:
            if "grid" in data:
                kwargs["grid"] = GridParams(**data["grid"])
            if "runtime" in data:
                kwargs["runtime"] = RuntimeParams(**data["runtime"])
        except TypeError as e:
            raise ValidationError(str(e)) from None
        if "advection" in data:
            kwargs["advection"] = data["advection"]
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "CoreConfig":
        """Read a YAML document with optional ``grid``, ``runtime`` and
        ``advection`` sections; missing sections keep their defaults.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If the document is not a mapping or a value is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        data = yaml.safe_load(path.read_text()) or {}
        if not isinstance(data, dict):
            raise ValidationError(
                f"{path}: expected a mapping of grid/runtime/advection sections, "
                f"got {type(data).__name__}"
            )
        return cls.from_dict(data)

    def to_yaml(self, path: str | Path | None = None) -> str:
        """Render as YAML, section by section, writing it to ``path`` if given."""
        text = yaml.safe_dump(self.to_dict(), default_flow_style=None, sort_keys=False)
        if path is not None:
            path = Path(path)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text)
        return text

    def build_grid(self) -> RegularCartesianGrid:
        """Construct the grid described by this configuration."""
        return RegularCartesianGrid(
            size=self.grid.size,
            length=self.grid.length,
            halo=self.grid.halo,
            origin=self.grid.origin,
            float_type=self.runtime.float_type,
        )

    def init_runtime(self) -> str:
        """Initialize Taichi from the runtime parameters."""
        backend = None if self.runtime.backend == "auto" else self.runtime.backend
        return init_taichi(
            backend=backend,
            debug=self.runtime.debug,
            default_fp=self.runtime.float_type,
        )
