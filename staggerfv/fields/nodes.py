"""Physical coordinates of staggered samples.

Cell-located samples sit at the grid's cell centers (xC, yC, zC); Face-located
samples sit at its faces (xF, yF, zF). Coordinate arrays are 1-based, so
``xnode(Face, i, grid)`` is the face between cells ``i-1`` and ``i``.

A field has N interior samples along every axis, so the coordinate sequence
of a Face-located axis drops the trailing (N+1)-th face.
"""

from typing import Any

import numpy as np

from staggerfv.core.locations import AXES, Cell, Face, axis_index, location_name
from staggerfv.errors import UnsupportedLocationError

# Coordinate array names per axis, (Cell, Face)
_COORDINATES = (("xC", "xF"), ("yC", "yF"), ("zC", "zF"))
_SIZES = ("Nx", "Ny", "Nz")


def _coordinate_array(axis: int, location, grid: Any):
    cell_name, face_name = _COORDINATES[axis]
    if location is Cell:
        return getattr(grid, cell_name)
    if location is Face:
        return getattr(grid, face_name)
    raise UnsupportedLocationError(
        f"No {AXES[axis]}-coordinates for location {location!r}; expected Cell or Face"
    )


def node(axis, location, index: int, grid: Any) -> float:
    """Coordinate of logical ``index`` along ``axis`` for a Cell or Face sample.

    Raises:
        IndexOutOfBoundsError: If index is outside the coordinate array
        UnsupportedLocationError: If location is not Cell or Face
    """
    return _coordinate_array(axis_index(axis), location, grid)[index]


def xnode(location, i: int, grid: Any) -> float:
    """x-coordinate of Cell or Face index ``i``."""
    return node(0, location, i, grid)


def ynode(location, j: int, grid: Any) -> float:
    """y-coordinate of Cell or Face index ``j``."""
    return node(1, location, j, grid)


def znode(location, k: int, grid: Any) -> float:
    """z-coordinate of Cell or Face index ``k``."""
    return node(2, location, k, grid)


def field_node(axis, index: int, field: Any) -> float:
    """Coordinate of ``index`` along ``axis`` at the field's location there."""
    a = axis_index(axis)
    return node(a, field.location[a], index, field.grid)


def axis_nodes(axis, field: Any) -> np.ndarray:
    """The N interior coordinates of a field along one axis.

    Returns:
        Array shaped to broadcast along ``axis``: (N, 1, 1), (1, N, 1) or (1, 1, N)
    """
    a = axis_index(axis)
    n = getattr(field.grid, _SIZES[a])
    coordinates = _coordinate_array(a, field.location[a], field.grid).parent
    if len(coordinates) not in (n, n + 1):
        raise ValueError(
            f"Grid {AXES[a]}-coordinates for {location_name(field.location)} have "
            f"{len(coordinates)} entries, expected {n} or {n + 1}"
        )
    shape = [1, 1, 1]
    shape[a] = n
    return np.array(coordinates[:n]).reshape(shape)


def xnodes(field: Any) -> np.ndarray:
    """x-coordinates of the field's samples, shape (Nx, 1, 1)."""
    return axis_nodes(0, field)


def ynodes(field: Any) -> np.ndarray:
    """y-coordinates of the field's samples, shape (1, Ny, 1)."""
    return axis_nodes(1, field)


def znodes(field: Any) -> np.ndarray:
    """z-coordinates of the field's samples, shape (1, 1, Nz)."""
    return axis_nodes(2, field)


def nodes(field: Any) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Broadcastable (x, y, z) coordinates of the field's interior samples."""
    return (xnodes(field), ynodes(field), znodes(field))
