"""
Centered second-order advection scheme.

Fluxes are products of two midpoint interpolations: the area flux of the
transporting velocity, moved to where the flux lives, times the transported
quantity moved to the same place. The pairing below is the energy-conserving
C-grid discretization; swapping which axis or direction an interpolation
uses breaks the conservation of kinetic energy.

The stencil reads one neighbor on each side, which a halo of width 1
provides, so no boundary-adjusted stencil is needed (boundary_buffer = 0).
"""

from dataclasses import dataclass
from typing import Any

from staggerfv.operators import (
    area_flux_x,
    area_flux_y,
    area_flux_z,
    interpolate_x_cell_to_face,
    interpolate_x_face_to_cell,
    interpolate_y_cell_to_face,
    interpolate_y_face_to_cell,
    interpolate_z_cell_to_face,
    interpolate_z_face_to_cell,
)


@dataclass(frozen=True)
class CenteredSecondOrder:
    """Centered second-order flux reconstruction.

    Attributes:
        boundary_scheme: Scheme used near boundaries; None for this scheme
    """

    boundary_scheme: Any = None

    name = "centered_second_order"

    @property
    def boundary_buffer(self) -> int:
        return 0

    @property
    def required_halo(self) -> int:
        return 1

    # Momentum fluxes of u, located at (Cell, Cell, Cell), (Face, Face, Cell)
    # and (Face, Cell, Face)

    def advective_momentum_flux_Uu(self, i, j, k, grid, U, u):
        return (
            interpolate_x_face_to_cell(i, j, k, grid, area_flux_x, U)
            * interpolate_x_face_to_cell(i, j, k, grid, u)
        )

    def advective_momentum_flux_Vu(self, i, j, k, grid, V, u):
        return (
            interpolate_x_cell_to_face(i, j, k, grid, area_flux_y, V)
            * interpolate_y_cell_to_face(i, j, k, grid, u)
        )

    def advective_momentum_flux_Wu(self, i, j, k, grid, W, u):
        return (
            interpolate_x_cell_to_face(i, j, k, grid, area_flux_z, W)
            * interpolate_z_cell_to_face(i, j, k, grid, u)
        )

    # Momentum fluxes of v, located at (Face, Face, Cell), (Cell, Cell, Cell)
    # and (Cell, Face, Face)

    def advective_momentum_flux_Uv(self, i, j, k, grid, U, v):
        return (
            interpolate_y_cell_to_face(i, j, k, grid, area_flux_x, U)
            * interpolate_x_cell_to_face(i, j, k, grid, v)
        )

    def advective_momentum_flux_Vv(self, i, j, k, grid, V, v):
        return (
            interpolate_y_face_to_cell(i, j, k, grid, area_flux_y, V)
            * interpolate_y_face_to_cell(i, j, k, grid, v)
        )

    def advective_momentum_flux_Wv(self, i, j, k, grid, W, v):
        return (
            interpolate_y_cell_to_face(i, j, k, grid, area_flux_z, W)
            * interpolate_z_cell_to_face(i, j, k, grid, v)
        )

    # Momentum fluxes of w, located at (Face, Cell, Face), (Cell, Face, Face)
    # and (Cell, Cell, Cell)

    def advective_momentum_flux_Uw(self, i, j, k, grid, U, w):
        return (
            interpolate_z_cell_to_face(i, j, k, grid, area_flux_x, U)
            * interpolate_x_cell_to_face(i, j, k, grid, w)
        )

    def advective_momentum_flux_Vw(self, i, j, k, grid, V, w):
        return (
            interpolate_z_cell_to_face(i, j, k, grid, area_flux_y, V)
            * interpolate_y_cell_to_face(i, j, k, grid, w)
        )

    def advective_momentum_flux_Ww(self, i, j, k, grid, W, w):
        return (
            interpolate_z_face_to_cell(i, j, k, grid, area_flux_z, W)
            * interpolate_z_face_to_cell(i, j, k, grid, w)
        )

    # Symmetric interpolation

    def symmetric_interpolate_x_to_cell(self, i, j, k, grid, u):
        return interpolate_x_face_to_cell(i, j, k, grid, u)

    def symmetric_interpolate_x_to_face(self, i, j, k, grid, c):
        return interpolate_x_cell_to_face(i, j, k, grid, c)

    def symmetric_interpolate_y_to_cell(self, i, j, k, grid, v):
        return interpolate_y_face_to_cell(i, j, k, grid, v)

    def symmetric_interpolate_y_to_face(self, i, j, k, grid, c):
        return interpolate_y_cell_to_face(i, j, k, grid, c)

    def symmetric_interpolate_z_to_cell(self, i, j, k, grid, w):
        return interpolate_z_face_to_cell(i, j, k, grid, w)

    def symmetric_interpolate_z_to_face(self, i, j, k, grid, c):
        return interpolate_z_cell_to_face(i, j, k, grid, c)

    # Tracer fluxes u*Ax*c̄ˣ, v*Ay*c̄ʸ and w*Az*c̄ᶻ through the faces of a cell

    def advective_tracer_flux_x(self, i, j, k, grid, U, c):
        return area_flux_x(i, j, k, grid, U) * interpolate_x_cell_to_face(i, j, k, grid, c)

    def advective_tracer_flux_y(self, i, j, k, grid, V, c):
        return area_flux_y(i, j, k, grid, V) * interpolate_y_cell_to_face(i, j, k, grid, c)

    def advective_tracer_flux_z(self, i, j, k, grid, W, c):
        return area_flux_z(i, j, k, grid, W) * interpolate_z_cell_to_face(i, j, k, grid, c)


centered_second_order = CenteredSecondOrder()
