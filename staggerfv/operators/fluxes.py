"""Area-weighted fluxes through cell faces.

Multiplying a face-normal velocity by the area of the face it crosses gives
a volume flux [m³/s]. Each operator is defined only for the velocity
component living on its own faces.
"""

from typing import Any

from staggerfv.core.locations import X_FACE, Y_FACE, Z_FACE
from staggerfv.operators.stencils import located_source, read


def area_flux_x(i: int, j: int, k: int, grid: Any, U: Any, *args) -> float:
    """Volume flux U * Ax through the x-face at (i, j, k)."""
    src = located_source(U, X_FACE, "area_flux_x")
    return grid.area_x(i, j, k) * read(src, i, j, k, grid, args)


def area_flux_y(i: int, j: int, k: int, grid: Any, V: Any, *args) -> float:
    """Volume flux V * Ay through the y-face at (i, j, k)."""
    src = located_source(V, Y_FACE, "area_flux_y")
    return grid.area_y(i, j, k) * read(src, i, j, k, grid, args)


def area_flux_z(i: int, j: int, k: int, grid: Any, W: Any, *args) -> float:
    """Volume flux W * Az through the z-face at (i, j, k)."""
    src = located_source(W, Z_FACE, "area_flux_z")
    return grid.area_z(i, j, k) * read(src, i, j, k, grid, args)
