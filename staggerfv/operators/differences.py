"""Two-point differences between staggered locations.

    cell_to_face:  f[i] - f[i-1]    difference of Cell values, located at Face i
    face_to_cell:  f[i+1] - f[i]    difference of Face values, located at Cell i

Dividing a face_to_cell difference of face fluxes by the cell volume gives
the flux-form divergence used by the advection operators.
"""

from typing import Any

from staggerfv.core.locations import Cell, Face
from staggerfv.operators.stencils import read, source


def difference_x_cell_to_face(i: int, j: int, k: int, grid: Any, f: Any, *args) -> float:
    src = source(f, 0, Cell, "difference_x_cell_to_face")
    return read(src, i, j, k, grid, args) - read(src, i - 1, j, k, grid, args)


def difference_x_face_to_cell(i: int, j: int, k: int, grid: Any, f: Any, *args) -> float:
    src = source(f, 0, Face, "difference_x_face_to_cell")
    return read(src, i + 1, j, k, grid, args) - read(src, i, j, k, grid, args)


def difference_y_cell_to_face(i: int, j: int, k: int, grid: Any, f: Any, *args) -> float:
    src = source(f, 1, Cell, "difference_y_cell_to_face")
    return read(src, i, j, k, grid, args) - read(src, i, j - 1, k, grid, args)


def difference_y_face_to_cell(i: int, j: int, k: int, grid: Any, f: Any, *args) -> float:
    src = source(f, 1, Face, "difference_y_face_to_cell")
    return read(src, i, j + 1, k, grid, args) - read(src, i, j, k, grid, args)


def difference_z_cell_to_face(i: int, j: int, k: int, grid: Any, f: Any, *args) -> float:
    src = source(f, 2, Cell, "difference_z_cell_to_face")
    return read(src, i, j, k, grid, args) - read(src, i, j, k - 1, grid, args)


def difference_z_face_to_cell(i: int, j: int, k: int, grid: Any, f: Any, *args) -> float:
    src = source(f, 2, Face, "difference_z_face_to_cell")
    return read(src, i, j, k + 1, grid, args) - read(src, i, j, k, grid, args)
