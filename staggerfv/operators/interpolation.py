"""Second-order symmetric interpolation between staggered locations.

Each operator averages two neighbors along one axis, shifting a value half a
cell. Face ``i`` sits between Cell ``i-1`` and Cell ``i``:

    cell_to_face:  (f[i-1] + f[i]) / 2    reads Cell values, returns a Face value
    face_to_cell:  (f[i] + f[i+1]) / 2    reads Face values, returns a Cell value

Interpolation is exact for constant and linear fields.
"""

from typing import Any

from staggerfv.core.locations import Cell, Face
from staggerfv.operators.stencils import read, source


def interpolate_x_cell_to_face(i: int, j: int, k: int, grid: Any, f: Any, *args) -> float:
    """Interpolate Cell values of f in x onto the x-face at index i."""
    src = source(f, 0, Cell, "interpolate_x_cell_to_face")
    return 0.5 * (read(src, i - 1, j, k, grid, args) + read(src, i, j, k, grid, args))


def interpolate_x_face_to_cell(i: int, j: int, k: int, grid: Any, f: Any, *args) -> float:
    """Interpolate x-face values of f onto the cell center at index i."""
    src = source(f, 0, Face, "interpolate_x_face_to_cell")
    return 0.5 * (read(src, i, j, k, grid, args) + read(src, i + 1, j, k, grid, args))


def interpolate_y_cell_to_face(i: int, j: int, k: int, grid: Any, f: Any, *args) -> float:
    """Interpolate Cell values of f in y onto the y-face at index j."""
    src = source(f, 1, Cell, "interpolate_y_cell_to_face")
    return 0.5 * (read(src, i, j - 1, k, grid, args) + read(src, i, j, k, grid, args))


def interpolate_y_face_to_cell(i: int, j: int, k: int, grid: Any, f: Any, *args) -> float:
    """Interpolate y-face values of f onto the cell center at index j."""
    src = source(f, 1, Face, "interpolate_y_face_to_cell")
    return 0.5 * (read(src, i, j, k, grid, args) + read(src, i, j + 1, k, grid, args))


def interpolate_z_cell_to_face(i: int, j: int, k: int, grid: Any, f: Any, *args) -> float:
    """Interpolate Cell values of f in z onto the z-face at index k."""
    src = source(f, 2, Cell, "interpolate_z_cell_to_face")
    return 0.5 * (read(src, i, j, k - 1, grid, args) + read(src, i, j, k, grid, args))


def interpolate_z_face_to_cell(i: int, j: int, k: int, grid: Any, f: Any, *args) -> float:
    """Interpolate z-face values of f onto the cell center at index k."""
    src = source(f, 2, Face, "interpolate_z_face_to_cell")
    return 0.5 * (read(src, i, j, k, grid, args) + read(src, i, j, k + 1, grid, args))
