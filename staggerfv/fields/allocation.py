"""Architecture-dispatched zero-filled buffer allocation.

Buffers sized from a grid carry the halo padding and are addressed by
logical indices: index 1 is the first interior cell on every axis, and the
halo spans ``1 - H .. 0`` and ``N + 1 .. N + H``. Buffers sized from explicit
extents are plain 0-based staging buffers.

    host = zeros(Architecture.CPU, grid)            # OffsetArray over numpy
    device = zeros(Architecture.GPU, grid)          # offset Taichi field
    staging = zeros(Architecture.GPU, grid, extents=(8, 8, 1))
"""

import logging
from typing import Any, Protocol, runtime_checkable

import numpy as np
import taichi as ti

from staggerfv.config import ensure_taichi
from staggerfv.core.architectures import Architecture
from staggerfv.core.dtypes import to_numpy_dtype, to_taichi_dtype
from staggerfv.core.offset_array import OffsetArray
from staggerfv.errors import ArchitectureMismatchError

logger = logging.getLogger(__name__)


def halo_offsets(grid) -> tuple[int, int, int]:
    """Logical index of the first halo cell along each axis."""
    return (1 - grid.Hx, 1 - grid.Hy, 1 - grid.Hz)


def padded_shape(grid) -> tuple[int, int, int]:
    """Buffer shape including halos on both sides of every axis."""
    return (
        grid.Nx + 2 * grid.Hx,
        grid.Ny + 2 * grid.Hy,
        grid.Nz + 2 * grid.Hz,
    )


@runtime_checkable
class Allocator(Protocol):
    """Protocol for architecture-specific zero-filled allocation."""

    architecture: Architecture

    def zeros(self, dtype: Any, grid: Any) -> Any:
        """Halo-padded buffer addressed by logical indices."""
        ...

    def staging_zeros(self, dtype: Any, extents: tuple[int, ...]) -> Any:
        """Unshifted 0-based buffer of the given extents."""
        ...


class HostAllocator:
    """numpy buffers in host memory."""

    architecture = Architecture.CPU

    def zeros(self, dtype: Any, grid: Any) -> OffsetArray:
        shape = padded_shape(grid)
        logger.debug("Allocating host buffer %s (%s)", shape, dtype)
        underlying_data = np.zeros(shape, dtype=to_numpy_dtype(dtype))
        return OffsetArray(underlying_data, halo_offsets(grid))

    def staging_zeros(self, dtype: Any, extents: tuple[int, ...]) -> np.ndarray:
        return np.zeros(tuple(extents), dtype=to_numpy_dtype(dtype))


class DeviceAllocator:
    """Taichi fields in accelerator memory.

    Device memory is not guaranteed to be zeroed on allocation, so every
    buffer is cleared with a device-side fill before it is returned.
    """

    architecture = Architecture.GPU

    def zeros(self, dtype: Any, grid: Any) -> Any:
        ensure_taichi()
        shape = padded_shape(grid)
        logger.debug("Allocating device buffer %s (%s)", shape, dtype)
        underlying_data = ti.field(
            dtype=to_taichi_dtype(dtype), shape=shape, offset=halo_offsets(grid)
        )
        underlying_data.fill(0)
        return underlying_data

    def staging_zeros(self, dtype: Any, extents: tuple[int, ...]) -> Any:
        ensure_taichi()
        data = ti.field(dtype=to_taichi_dtype(dtype), shape=tuple(extents))
        data.fill(0)
        return data


_ALLOCATORS: dict[Architecture, Allocator] = {
    Architecture.CPU: HostAllocator(),
    Architecture.GPU: DeviceAllocator(),
}


def get_allocator(arch: Architecture) -> Allocator:
    """Get the allocator for an architecture.

    Raises:
        ArchitectureMismatchError: If no allocator handles ``arch``
    """
    if arch not in _ALLOCATORS:
        raise ArchitectureMismatchError(
            f"No allocator registered for architecture {arch!r}. "
            f"Available: {list(_ALLOCATORS.keys())}"
        )
    return _ALLOCATORS[arch]


def zeros(
    arch: Architecture,
    grid: Any,
    dtype: Any = None,
    extents: tuple[int, int, int] | None = None,
) -> Any:
    """Allocate a zero-filled buffer on ``arch``.

    Args:
        arch: Target architecture
        grid: Grid providing extents, halos and the default float type
        dtype: Element type (default: grid.float_type)
        extents: If given, allocate an unshifted buffer of exactly this
            shape instead of a halo-padded one

    Returns:
        OffsetArray or offset Taichi field for grid-sized buffers; numpy
        array or plain Taichi field for explicit extents
    """
    allocator = get_allocator(arch)
    if dtype is None:
        dtype = grid.float_type
    if extents is not None:
        return allocator.staging_zeros(dtype, extents)
    return allocator.zeros(dtype, grid)
