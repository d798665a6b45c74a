"""Operand access shared by the host stencil operators.

Operators take their operand ``f`` as one of:
- a CPU Field, read at logical indices after its location and halo state
  have been checked
- an OffsetArray, or a bare numpy staging array addressed from 0; both
  raise on indices outside the buffer instead of wrapping
- a callable ``f(i, j, k, grid, *args)``, evaluated in place, which is how
  operators compose: ``interpolate_x_face_to_cell(i, j, k, grid, area_flux_x, U)``

The indices may be integers, giving one value, or broadcastable integer
arrays, giving one value per index point. ``compute_interior`` uses the
second form to evaluate an operator over the whole interior in a handful of
array operations.
"""

from typing import Any, Callable

import numpy as np

from staggerfv.config import debug_enabled
from staggerfv.core.architectures import Architecture, architecture_of
from staggerfv.core.dtypes import to_numpy_dtype
from staggerfv.core.locations import AXES, location_name
from staggerfv.core.offset_array import OffsetArray
from staggerfv.errors import (
    ArchitectureMismatchError,
    StaleHaloError,
    UnsupportedLocationError,
)
from staggerfv.fields.base import Field


def host_data(f: Any) -> Any:
    """Return something indexable (or callable) on the host for operand ``f``.

    Raises:
        ArchitectureMismatchError: If f lives in accelerator memory
        StaleHaloError: In debug mode, if f's halos were not refilled
    """
    if isinstance(f, Field):
        if f.architecture is not Architecture.CPU:
            raise ArchitectureMismatchError(
                f"Host operator called on a {f.architecture.name} field; "
                "use the Taichi kernels in staggerfv.kernels"
            )
        if debug_enabled() and not f.halos_filled:
            raise StaleHaloError(f"{f!r} has stale halos")
        return f.data
    if callable(f):
        return f
    if architecture_of(f) is not Architecture.CPU:
        raise ArchitectureMismatchError(
            f"Host operator called on a buffer of type {type(f).__name__}"
        )
    if isinstance(f, np.ndarray):
        return OffsetArray(f, (0,) * f.ndim)
    return f


def source(f: Any, axis: int, expected, op: str) -> Any:
    """host_data() for a stencil that reads ``f`` at ``expected`` along ``axis``.

    Raises:
        UnsupportedLocationError: If f is a Field located elsewhere on that axis
    """
    if isinstance(f, Field) and f.location[axis] is not expected:
        raise UnsupportedLocationError(
            f"{op} reads {expected.__name__} values along {AXES[axis]}, "
            f"got a field at {location_name(f.location)}"
        )
    return host_data(f)


def located_source(f: Any, location: tuple, op: str) -> Any:
    """host_data() for an operator defined at exactly one location triple."""
    if isinstance(f, Field) and f.location != location:
        raise UnsupportedLocationError(
            f"{op} is defined at {location_name(location)}, "
            f"got a field at {location_name(f.location)}"
        )
    return host_data(f)


def read(src: Any, i, j, k, grid: Any, args: tuple):
    """Value of a prepared operand at (i, j, k)."""
    if callable(src):
        return src(i, j, k, grid, *args)
    return src[i, j, k]


def interior_indices(grid: Any) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Open mesh of interior logical indices, shaped (Nx,1,1), (1,Ny,1), (1,1,Nz)."""
    return np.ix_(
        np.arange(1, grid.Nx + 1), np.arange(1, grid.Ny + 1), np.arange(1, grid.Nz + 1)
    )


def compute_interior(op: Callable, grid: Any, *args) -> np.ndarray:
    """Evaluate a per-cell operator over the interior.

    The operator is called once with index arrays covering every interior
    point, so it must be built from elementwise arithmetic on its reads, as
    all operators in this package are.

    Args:
        op: Function ``op(i, j, k, grid, *args)``
        grid: Grid whose interior is swept
        *args: Operands passed through to op

    Returns:
        (Nx, Ny, Nz) array; element [i-1, j-1, k-1] holds op at logical (i, j, k)
    """
    out = np.empty((grid.Nx, grid.Ny, grid.Nz), dtype=to_numpy_dtype(grid.float_type))
    out[...] = op(*interior_indices(grid), grid, *args)
    return out
