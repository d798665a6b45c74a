"""Grid contract and a regular Cartesian grid.

Grids are owned by the model and shared, read-only, by every field built on
them. The core only consumes a grid through the ``Grid`` protocol:

- interior cell counts Nx, Ny, Nz and halo widths Hx, Hy, Hz
- 1-based coordinate arrays xC, yC, zC (N entries, cell centers) and
  xF, yF, zF (N+1 entries, the faces bounding those cells)
- face areas area_x/y/z(i, j, k) and cell volume volume(i, j, k)
- float_type, the element type of fields allocated on the grid

``RegularCartesianGrid`` implements it for uniform spacing. Face ``i`` sits
between Cell ``i-1`` and Cell ``i``, so ``xF[i] <= xC[i] <= xF[i+1]``.
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Protocol, runtime_checkable

import numpy as np

from staggerfv.core.dtypes import DTYPE, to_numpy_dtype
from staggerfv.core.offset_array import OffsetArray


@runtime_checkable
class Grid(Protocol):
    """What fields and operators require of a grid."""

    Nx: int
    Ny: int
    Nz: int
    Hx: int
    Hy: int
    Hz: int
    float_type: Any

    @property
    def xC(self) -> OffsetArray: ...

    @property
    def xF(self) -> OffsetArray: ...

    @property
    def yC(self) -> OffsetArray: ...

    @property
    def yF(self) -> OffsetArray: ...

    @property
    def zC(self) -> OffsetArray: ...

    @property
    def zF(self) -> OffsetArray: ...

    def area_x(self, i: int, j: int, k: int) -> float: ...

    def area_y(self, i: int, j: int, k: int) -> float: ...

    def area_z(self, i: int, j: int, k: int) -> float: ...

    def volume(self, i: int, j: int, k: int) -> float: ...


@dataclass(frozen=True)
class RegularCartesianGrid:
    """Immutable uniformly spaced grid on a box.

    Attributes:
        size: Interior cell counts (Nx, Ny, Nz)
        length: Domain lengths (Lx, Ly, Lz) [m]
        halo: Halo widths (Hx, Hy, Hz) on each side of every axis
        origin: Lower corner (x0, y0, z0) [m]; defaults to (0, 0, -Lz) so
            that z runs from the bottom up to a surface at z = 0
        float_type: Element type of fields built on this grid

    Properties:
        Nx, Ny, Nz / Hx, Hy, Hz / Lx, Ly, Lz: Per-axis unpacking
        dx, dy, dz: Grid spacing [m]
        padded_shape: Buffer shape (Nx+2Hx, Ny+2Hy, Nz+2Hz)
        xC, xF, yC, yF, zC, zF: 1-based coordinate arrays
    """

    size: tuple[int, int, int]
    length: tuple[float, float, float]
    halo: tuple[int, int, int] = (1, 1, 1)
    origin: tuple[float, float, float] | None = None
    float_type: Any = field(default=DTYPE, compare=False)

    def __post_init__(self):
        """Validate and normalize dimensions."""
        size = tuple(int(n) for n in self.size)
        length = tuple(float(L) for L in self.length)
        halo = tuple(int(h) for h in self.halo)
        if len(size) != 3 or len(length) != 3 or len(halo) != 3:
            raise ValueError("size, length and halo must each have 3 entries")
        if any(n < 1 for n in size):
            raise ValueError(f"size must be >= 1 along every axis, got {size}")
        if any(L <= 0 for L in length):
            raise ValueError(f"length must be > 0 along every axis, got {length}")
        if any(h < 0 for h in halo):
            raise ValueError(f"halo must be >= 0 along every axis, got {halo}")

        if self.origin is None:
            origin = (0.0, 0.0, -length[2])
        else:
            origin = tuple(float(o) for o in self.origin)
            if len(origin) != 3:
                raise ValueError("origin must have 3 entries")

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "size", size)
        object.__setattr__(self, "length", length)
        object.__setattr__(self, "halo", halo)
        object.__setattr__(self, "origin", origin)

    @property
    def Nx(self) -> int:
        return self.size[0]

    @property
    def Ny(self) -> int:
        return self.size[1]

    @property
    def Nz(self) -> int:
        return self.size[2]

    @property
    def Hx(self) -> int:
        return self.halo[0]

    @property
    def Hy(self) -> int:
        return self.halo[1]

    @property
    def Hz(self) -> int:
        return self.halo[2]

    @property
    def Lx(self) -> float:
        return self.length[0]

    @property
    def Ly(self) -> float:
        return self.length[1]

    @property
    def Lz(self) -> float:
        return self.length[2]

    @property
    def dx(self) -> float:
        """Grid spacing in x [m]."""
        return self.Lx / self.Nx

    @property
    def dy(self) -> float:
        """Grid spacing in y [m]."""
        return self.Ly / self.Ny

    @property
    def dz(self) -> float:
        """Grid spacing in z [m]."""
        return self.Lz / self.Nz

    @property
    def padded_shape(self) -> tuple[int, int, int]:
        """Shape of a halo-padded field buffer."""
        return tuple(n + 2 * h for n, h in zip(self.size, self.halo))

    @property
    def n_cells(self) -> int:
        """Number of interior cells."""
        return self.Nx * self.Ny * self.Nz

    def _faces(self, axis: int) -> OffsetArray:
        n = self.size[axis]
        start = self.origin[axis]
        faces = start + self.length[axis] * np.arange(n + 1) / n
        return OffsetArray(faces.astype(to_numpy_dtype(self.float_type)), (1,))

    def _centers(self, axis: int) -> OffsetArray:
        faces = self._faces(axis).parent
        return OffsetArray(0.5 * (faces[:-1] + faces[1:]), (1,))

    @cached_property
    def xC(self) -> OffsetArray:
        """Cell-center x coordinates, indices 1..Nx."""
        return self._centers(0)

    @cached_property
    def xF(self) -> OffsetArray:
        """Face x coordinates, indices 1..Nx+1."""
        return self._faces(0)

    @cached_property
    def yC(self) -> OffsetArray:
        """Cell-center y coordinates, indices 1..Ny."""
        return self._centers(1)

    @cached_property
    def yF(self) -> OffsetArray:
        """Face y coordinates, indices 1..Ny+1."""
        return self._faces(1)

    @cached_property
    def zC(self) -> OffsetArray:
        """Cell-center z coordinates, indices 1..Nz."""
        return self._centers(2)

    @cached_property
    def zF(self) -> OffsetArray:
        """Face z coordinates, indices 1..Nz+1."""
        return self._faces(2)

    # Metrics are uniform on a regular grid; indices are accepted for the
    # Grid contract shared with stretched grids.

    def area_x(self, i: int, j: int, k: int) -> float:
        """Area of the x-face at (i, j, k) [m²]."""
        return self.dy * self.dz

    def area_y(self, i: int, j: int, k: int) -> float:
        """Area of the y-face at (i, j, k) [m²]."""
        return self.dx * self.dz

    def area_z(self, i: int, j: int, k: int) -> float:
        """Area of the z-face at (i, j, k) [m²]."""
        return self.dx * self.dy

    def volume(self, i: int, j: int, k: int) -> float:
        """Volume of the cell at (i, j, k) [m³]."""
        return self.dx * self.dy * self.dz
