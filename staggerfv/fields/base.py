"""Staggered fields: halo-padded buffers tagged with a C-grid location.

A Field owns one buffer and borrows its grid. The buffer spans logical
indices ``1 - H .. N + H`` along each axis (interior ``1 .. N``), and the
location triple fixes where the samples sit:

    c = CellField(Architecture.CPU, grid)    # (Cell, Cell, Cell): tracers
    u = XFaceField(Architecture.CPU, grid)   # (Face, Cell, Cell): x-velocity
    u[1, 1, 1] = 0.5
    u.interior()                             # (Nx, Ny, Nz) view, no halos

Halos are written by boundary-condition code, which should call
``mark_halos_filled()`` afterwards; whoever updates the interior afterwards
calls ``mark_halos_stale()``. The flag is only checked in debug mode.
"""

import numbers
from typing import Any

import numpy as np

from staggerfv.core.architectures import Architecture, architecture_of
from staggerfv.core.dtypes import to_numpy_dtype
from staggerfv.core.locations import (
    CENTER,
    X_FACE,
    Y_FACE,
    Z_FACE,
    location_name,
    validate_location,
)
from staggerfv.core.offset_array import OffsetArray, shift_index
from staggerfv.errors import ArchitectureMismatchError, IndexOutOfBoundsError
from staggerfv.fields import nodes as _nodes
from staggerfv.fields.allocation import get_allocator, halo_offsets, padded_shape, zeros


def _adopt(data: Any, arch: Architecture, grid: Any) -> Any:
    """Copy a caller-supplied buffer into a new buffer with logical indexing.

    The supplied buffer is read in storage order: its element [0, 0, 0] is
    logical (1 - Hx, 1 - Hy, 1 - Hz) whatever indexing it carried, so a plain
    0-based array or Taichi field of the padded shape lines up with the halos.
    """
    found = architecture_of(data)
    if found is not arch:
        raise ArchitectureMismatchError(
            f"Buffer lives on {found}, but the field was requested on {arch}"
        )

    shape = tuple(data.shape)
    expected = padded_shape(grid)
    if shape != expected:
        raise ValueError(
            f"Buffer shape {shape} does not match the padded grid shape {expected}"
        )
    if isinstance(data, OffsetArray) and data.offsets != halo_offsets(grid):
        raise ValueError(
            f"Buffer offsets {data.offsets} do not match the grid halo "
            f"offsets {halo_offsets(grid)}"
        )

    values = np.asarray(data) if arch is Architecture.CPU else data.to_numpy()
    buffer = zeros(arch, grid, dtype=data.dtype)
    _write(buffer, values)
    return buffer


def _write(buffer: Any, values: np.ndarray) -> None:
    """Overwrite a whole padded buffer from a 0-based host array."""
    if isinstance(buffer, OffsetArray):
        buffer.parent[...] = values
    else:
        buffer.from_numpy(values.astype(to_numpy_dtype(buffer.dtype)))


class Field:
    """A field located at (X, Y, Z) on a grid, each of X, Y, Z Cell or Face.

    Attributes:
        location: Static location triple
        architecture: Where the buffer lives (CPU or GPU)
        grid: The shared, externally owned grid
        data: The buffer (OffsetArray on CPU, offset Taichi field on GPU)
        size: Interior extents (Nx, Ny, Nz), not the padded buffer shape

    Args:
        location: Triple of Cell/Face markers
        architecture: Target architecture
        grid: Grid providing extents, halos and coordinates
        data: Optional pre-populated buffer of the padded shape on the same
            architecture. Its values are copied, so the field never aliases
            caller memory.
        dtype: Element type of a newly allocated buffer (default: grid float type)

    Raises:
        UnsupportedLocationError: If location is not a Cell/Face triple
        ArchitectureMismatchError: If data lives on another architecture
        ValueError: If data has the wrong shape
    """

    def __init__(
        self,
        location,
        architecture: Architecture,
        grid: Any,
        data: Any = None,
        dtype: Any = None,
    ):
        self._location = validate_location(location)
        get_allocator(architecture)
        if data is None:
            data = zeros(architecture, grid, dtype=dtype)
        else:
            data = _adopt(data, architecture, grid)

        self._data = data
        self._grid = grid
        self._architecture = architecture
        self._axes = tuple(
            range(o, o + n) for o, n in zip(halo_offsets(grid), padded_shape(grid))
        )
        self._halos_filled = True

    @property
    def location(self) -> tuple:
        """Static location triple."""
        return self._location

    @property
    def architecture(self) -> Architecture:
        return self._architecture

    @property
    def grid(self) -> Any:
        return self._grid

    @property
    def data(self) -> Any:
        return self._data

    @property
    def parent(self) -> Any:
        """Raw 0-based buffer (numpy array on CPU, the Taichi field on GPU)."""
        if isinstance(self._data, OffsetArray):
            return self._data.parent
        return self._data

    @property
    def dtype(self) -> Any:
        return self._data.dtype

    @property
    def size(self) -> tuple[int, int, int]:
        """Interior extents of the grid."""
        return (self._grid.Nx, self._grid.Ny, self._grid.Nz)

    @property
    def axes(self) -> tuple[range, range, range]:
        """Valid logical index range along each axis, halos included."""
        return self._axes

    # Indexing

    def _check_index(self, index) -> tuple:
        if not isinstance(index, tuple) or len(index) != 3:
            raise IndexOutOfBoundsError(f"Fields take 3 indices, got {index!r}")
        for axis, (i, valid) in enumerate(zip(index, self._axes)):
            shift_index(i, axis, valid)
        if all(isinstance(i, numbers.Integral) for i in index):
            return tuple(int(i) for i in index)
        if not isinstance(self._data, OffsetArray):
            raise TypeError("Device fields are indexed one element at a time")
        return index

    def __getitem__(self, index):
        return self._data[self._check_index(index)]

    def __setitem__(self, index, value) -> None:
        self._data[self._check_index(index)] = value

    def __iter__(self):
        if isinstance(self._data, OffsetArray):
            return iter(self._data)
        return iter(self._data.to_numpy().flat)

    # Views and copies

    def _interior_slices(self) -> tuple[slice, slice, slice]:
        g = self._grid
        return (
            slice(g.Hx, g.Hx + g.Nx),
            slice(g.Hy, g.Hy + g.Ny),
            slice(g.Hz, g.Hz + g.Nz),
        )

    def interior(self) -> np.ndarray:
        """Interior points, logical indices 1..N on every axis.

        On CPU this is a view into the buffer. Device memory cannot be viewed
        from the host, so on GPU it is a host copy.
        """
        if isinstance(self._data, OffsetArray):
            return self._data.parent[self._interior_slices()]
        return self._data.to_numpy()[self._interior_slices()]

    def to_numpy(self) -> np.ndarray:
        """Host copy of the padded buffer (0-based)."""
        if isinstance(self._data, OffsetArray):
            return self._data.parent.copy()
        return self._data.to_numpy()

    def to_architecture(self, arch: Architecture) -> "Field":
        """Copy this field onto another architecture.

        The copy owns a new buffer; the grid is shared.
        """
        copy = Field(self._location, arch, self._grid, dtype=self.dtype)
        _write(copy.data, self.to_numpy())
        copy._halos_filled = self._halos_filled
        return copy

    # Mutation

    def fill(self, value) -> None:
        """Set every element, halos included."""
        self._data.fill(value)
        self._halos_filled = True

    def set(self, value) -> None:
        """Set the interior from a scalar, an array, or a function of position.

        Args:
            value: Number; array broadcastable to ``size``; or callable
                ``f(x, y, z)`` evaluated on the field's nodes with broadcasting

        Halos are left untouched and marked stale when the grid has any.
        """
        if callable(value):
            value = value(*self.nodes())
        values = np.broadcast_to(np.asarray(value), self.size)

        if isinstance(self._data, OffsetArray):
            self.interior()[...] = values
        else:
            full = self._data.to_numpy()
            full[self._interior_slices()] = values
            self._data.from_numpy(full)

        g = self._grid
        if g.Hx or g.Hy or g.Hz:
            self._halos_filled = False

    # Halo freshness

    @property
    def halos_filled(self) -> bool:
        """Whether halos were refilled since the interior last changed."""
        return self._halos_filled

    def mark_halos_filled(self) -> None:
        """Record that boundary-condition code has filled the halos."""
        self._halos_filled = True

    def mark_halos_stale(self) -> None:
        """Record that the interior changed and halos need refilling."""
        self._halos_filled = False

    # Coordinates

    def node(self, axis, index: int) -> float:
        """Physical coordinate of logical ``index`` along ``axis``."""
        return _nodes.field_node(axis, index, self)

    def nodes(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Broadcastable coordinate sequences (x, y, z) of the interior samples."""
        return _nodes.nodes(self)

    def __repr__(self) -> str:
        return (
            f"Field at {location_name(self._location)} on "
            f"{self._architecture.name}, size {self.size}, "
            f"halo {(self._grid.Hx, self._grid.Hy, self._grid.Hz)}"
        )


def CellField(arch: Architecture, grid: Any, data: Any = None, dtype: Any = None) -> Field:
    """Return a Field at (Cell, Cell, Cell): tracers, pressure."""
    return Field(CENTER, arch, grid, data, dtype)


def XFaceField(arch: Architecture, grid: Any, data: Any = None, dtype: Any = None) -> Field:
    """Return a Field at (Face, Cell, Cell): x-velocity."""
    return Field(X_FACE, arch, grid, data, dtype)


def YFaceField(arch: Architecture, grid: Any, data: Any = None, dtype: Any = None) -> Field:
    """Return a Field at (Cell, Face, Cell): y-velocity."""
    return Field(Y_FACE, arch, grid, data, dtype)


def ZFaceField(arch: Architecture, grid: Any, data: Any = None, dtype: Any = None) -> Field:
    """Return a Field at (Cell, Cell, Face): z-velocity."""
    return Field(Z_FACE, arch, grid, data, dtype)
