"""
Advection scheme protocol.

A scheme reconstructs the advective fluxes through cell faces. Schemes are
stateless apart from an optional nested ``boundary_scheme`` applied within
``boundary_buffer`` cells of a boundary, where the main stencil would reach
past the halo.

Every flux method has the signature ``(i, j, k, grid, velocity, quantity)``
and returns the flux at the location the flux-form divergence needs:
- advective_tracer_flux_x/y/z: at the x/y/z-face of cell (i, j, k)
- advective_momentum_flux_Uu, Vv, Ww: at cell centers
- advective_momentum_flux_Vu, Uv: at (Face, Face, Cell) edges
- advective_momentum_flux_Wu, Uw: at (Face, Cell, Face) edges
- advective_momentum_flux_Wv, Vw: at (Cell, Face, Face) edges
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AdvectionScheme(Protocol):
    """Protocol for flux-reconstruction (advection) schemes."""

    name: str
    boundary_scheme: Any

    @property
    def boundary_buffer(self) -> int:
        """Cells from a boundary where the main stencil cannot be used."""
        ...

    @property
    def required_halo(self) -> int:
        """Minimum halo width the main stencil reads into."""
        ...

    def advective_tracer_flux_x(self, i: int, j: int, k: int, grid: Any, U: Any, c: Any) -> float:
        """Advective flux of tracer c through the x-face."""
        ...

    def advective_tracer_flux_y(self, i: int, j: int, k: int, grid: Any, V: Any, c: Any) -> float:
        """Advective flux of tracer c through the y-face."""
        ...

    def advective_tracer_flux_z(self, i: int, j: int, k: int, grid: Any, W: Any, c: Any) -> float:
        """Advective flux of tracer c through the z-face."""
        ...

    def advective_momentum_flux_Uu(self, i: int, j: int, k: int, grid: Any, U: Any, u: Any) -> float:
        ...

    def advective_momentum_flux_Vu(self, i: int, j: int, k: int, grid: Any, V: Any, u: Any) -> float:
        ...

    def advective_momentum_flux_Wu(self, i: int, j: int, k: int, grid: Any, W: Any, u: Any) -> float:
        ...

    def advective_momentum_flux_Uv(self, i: int, j: int, k: int, grid: Any, U: Any, v: Any) -> float:
        ...

    def advective_momentum_flux_Vv(self, i: int, j: int, k: int, grid: Any, V: Any, v: Any) -> float:
        ...

    def advective_momentum_flux_Wv(self, i: int, j: int, k: int, grid: Any, W: Any, v: Any) -> float:
        ...

    def advective_momentum_flux_Uw(self, i: int, j: int, k: int, grid: Any, U: Any, w: Any) -> float:
        ...

    def advective_momentum_flux_Vw(self, i: int, j: int, k: int, grid: Any, V: Any, w: Any) -> float:
        ...

    def advective_momentum_flux_Ww(self, i: int, j: int, k: int, grid: Any, W: Any, w: Any) -> float:
        ...
