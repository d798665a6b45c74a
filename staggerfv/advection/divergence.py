"""
Flux-form advection terms.

Each term is the divergence of the scheme's fluxes divided by the volume of
the cell (or velocity cell) it belongs to:

    div_Uc = (δx(U c) + δy(V c) + δz(W c)) / V

Summed over a closed or periodic domain the face differences cancel
pairwise, so the volume integral of the advected quantity is conserved
exactly. The tendency of the advected quantity is the negative of these.
"""

from typing import Any

from staggerfv.operators import (
    difference_x_cell_to_face,
    difference_x_face_to_cell,
    difference_y_cell_to_face,
    difference_y_face_to_cell,
    difference_z_cell_to_face,
    difference_z_face_to_cell,
)


def div_Uc(i: int, j: int, k: int, grid: Any, scheme: Any, U: Any, V: Any, W: Any, c: Any) -> float:
    """Advection of tracer c by (U, V, W), at (Cell, Cell, Cell)."""
    return (
        difference_x_face_to_cell(i, j, k, grid, scheme.advective_tracer_flux_x, U, c)
        + difference_y_face_to_cell(i, j, k, grid, scheme.advective_tracer_flux_y, V, c)
        + difference_z_face_to_cell(i, j, k, grid, scheme.advective_tracer_flux_z, W, c)
    ) / grid.volume(i, j, k)


def div_Uu(i: int, j: int, k: int, grid: Any, scheme: Any, U: Any, V: Any, W: Any, u: Any) -> float:
    """Advection of x-momentum u by (U, V, W), at (Face, Cell, Cell)."""
    return (
        difference_x_cell_to_face(i, j, k, grid, scheme.advective_momentum_flux_Uu, U, u)
        + difference_y_face_to_cell(i, j, k, grid, scheme.advective_momentum_flux_Vu, V, u)
        + difference_z_face_to_cell(i, j, k, grid, scheme.advective_momentum_flux_Wu, W, u)
    ) / grid.volume(i, j, k)


def div_Uv(i: int, j: int, k: int, grid: Any, scheme: Any, U: Any, V: Any, W: Any, v: Any) -> float:
    """Advection of y-momentum v by (U, V, W), at (Cell, Face, Cell)."""
    return (
        difference_x_face_to_cell(i, j, k, grid, scheme.advective_momentum_flux_Uv, U, v)
        + difference_y_cell_to_face(i, j, k, grid, scheme.advective_momentum_flux_Vv, V, v)
        + difference_z_face_to_cell(i, j, k, grid, scheme.advective_momentum_flux_Wv, W, v)
    ) / grid.volume(i, j, k)


def div_Uw(i: int, j: int, k: int, grid: Any, scheme: Any, U: Any, V: Any, W: Any, w: Any) -> float:
    """Advection of z-momentum w by (U, V, W), at (Cell, Cell, Face)."""
    return (
        difference_x_face_to_cell(i, j, k, grid, scheme.advective_momentum_flux_Uw, U, w)
        + difference_y_face_to_cell(i, j, k, grid, scheme.advective_momentum_flux_Vw, V, w)
        + difference_z_cell_to_face(i, j, k, grid, scheme.advective_momentum_flux_Ww, W, w)
    ) / grid.volume(i, j, k)
