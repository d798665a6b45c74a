"""Python-scope launchers for the accelerator kernels.

Launchers check their Field arguments once per launch, not per cell:
every field must live on the GPU architecture and share one grid, sit at the
location the kernel was written for, and (in debug mode) have fresh halos
wherever a stencil reads them. Outputs are written on the interior only and
marked as having stale halos.
"""

from typing import Any

from staggerfv.advection import CenteredSecondOrder, centered_second_order
from staggerfv.config import debug_enabled
from staggerfv.core.architectures import Architecture
from staggerfv.core.grid import RegularCartesianGrid
from staggerfv.core.locations import (
    CENTER,
    X_FACE,
    Y_FACE,
    Z_FACE,
    AXES,
    Cell,
    Face,
    axis_index,
    location_name,
)
from staggerfv.errors import (
    ArchitectureMismatchError,
    StaleHaloError,
    UnsupportedLocationError,
)
from staggerfv.fields.base import Field
from staggerfv.kernels import utils
from staggerfv.kernels.advection import (
    interpolate_kernel,
    momentum_advection_kernel,
    tracer_advection_kernel,
)


def _device_fields(*fields: Any) -> Any:
    """Check that all fields are GPU fields on one grid; return the grid."""
    grid = None
    for f in fields:
        if not isinstance(f, Field):
            raise TypeError(f"Kernels take Fields, got {type(f).__name__}")
        if f.architecture is not Architecture.GPU:
            raise ArchitectureMismatchError(
                f"Device kernel called on a {f.architecture.name} field; "
                "use the host operators in staggerfv.operators"
            )
        if grid is None:
            grid = f.grid
        elif f.grid is not grid:
            raise ValueError("All fields of a kernel launch must share one grid")
    return grid


def _require_location(f: Field, location: tuple, role: str) -> None:
    if f.location != location:
        raise UnsupportedLocationError(
            f"{role} must be located at {location_name(location)}, "
            f"got {location_name(f.location)}"
        )


def _require_fresh_halos(*fields: Field) -> None:
    if not debug_enabled():
        return
    for f in fields:
        if not f.halos_filled:
            raise StaleHaloError(f"{f!r} has stale halos")


def _uniform_metrics(grid: Any, required_halo: int) -> tuple[float, float, float, float]:
    if not isinstance(grid, RegularCartesianGrid):
        raise TypeError(
            f"Device kernels need uniform metrics, got {type(grid).__name__}"
        )
    if min(grid.halo) < required_halo:
        raise ValueError(
            f"Stencil needs halo >= {required_halo} on every axis, got {grid.halo}"
        )
    return (
        grid.area_x(1, 1, 1),
        grid.area_y(1, 1, 1),
        grid.area_z(1, 1, 1),
        grid.volume(1, 1, 1),
    )


def _check_scheme(scheme: Any) -> None:
    if not isinstance(scheme, CenteredSecondOrder):
        raise NotImplementedError(
            f"No device kernels for advection scheme {type(scheme).__name__}"
        )


def interpolate(src: Field, dst: Field, axis) -> None:
    """Interpolate src half a cell along ``axis`` into dst, over the interior.

    The direction follows the locations: a Cell-located src along ``axis``
    is averaged onto faces (dst at Face there), and vice versa. The other two
    axes must agree.

    Raises:
        UnsupportedLocationError: If dst is not src shifted along ``axis``
    """
    a = axis_index(axis)
    grid = _device_fields(src, dst)
    expected = list(src.location)
    expected[a] = Face if src.location[a] is Cell else Cell
    if dst.location != tuple(expected):
        raise UnsupportedLocationError(
            f"Interpolating {location_name(src.location)} along {AXES[a]} yields "
            f"{location_name(tuple(expected))}, got dst at {location_name(dst.location)}"
        )
    if grid.halo[a] < 1:
        raise ValueError(f"Interpolation along {AXES[a]} needs a halo of at least 1")
    _require_fresh_halos(src)

    interpolate_kernel(
        src.data, dst.data, a, src.location[a] is Cell, grid.Nx, grid.Ny, grid.Nz
    )
    dst.mark_halos_stale()


def compute_tracer_advection(
    G: Field, U: Field, V: Field, W: Field, c: Field, scheme: Any = centered_second_order
) -> None:
    """G = div(U c): flux-form advection of tracer c by (U, V, W).

    The tracer tendency is -G.
    """
    grid = _device_fields(G, U, V, W, c)
    _check_scheme(scheme)
    _require_location(G, CENTER, "Tracer tendency")
    _require_location(c, CENTER, "Tracer")
    _require_location(U, X_FACE, "U")
    _require_location(V, Y_FACE, "V")
    _require_location(W, Z_FACE, "W")
    Ax, Ay, Az, vol = _uniform_metrics(grid, scheme.required_halo)
    _require_fresh_halos(U, V, W, c)

    tracer_advection_kernel(
        G.data, U.data, V.data, W.data, c.data,
        grid.Nx, grid.Ny, grid.Nz, Ax, Ay, Az, vol,
    )
    G.mark_halos_stale()


def compute_momentum_advection(
    Gu: Field,
    Gv: Field,
    Gw: Field,
    U: Field,
    V: Field,
    W: Field,
    scheme: Any = centered_second_order,
) -> None:
    """(Gu, Gv, Gw) = div(U u), div(U v), div(U w) for velocity (U, V, W)."""
    grid = _device_fields(Gu, Gv, Gw, U, V, W)
    _check_scheme(scheme)
    for f, location, role in (
        (Gu, X_FACE, "Gu"), (U, X_FACE, "U"),
        (Gv, Y_FACE, "Gv"), (V, Y_FACE, "V"),
        (Gw, Z_FACE, "Gw"), (W, Z_FACE, "W"),
    ):
        _require_location(f, location, role)
    Ax, Ay, Az, vol = _uniform_metrics(grid, scheme.required_halo)
    _require_fresh_halos(U, V, W)

    momentum_advection_kernel(
        Gu.data, Gv.data, Gw.data, U.data, V.data, W.data,
        grid.Nx, grid.Ny, grid.Nz, Ax, Ay, Az, vol,
    )
    for G in (Gu, Gv, Gw):
        G.mark_halos_stale()


def fill_interior(field: Field, value: float) -> None:
    """Set the interior of a GPU field to a constant."""
    grid = _device_fields(field)
    utils.fill_interior(field.data, value, grid.Nx, grid.Ny, grid.Nz)
    if any(grid.halo):
        field.mark_halos_stale()


def copy_field(src: Field, dst: Field) -> None:
    """Copy a GPU field into another at the same location, halos included."""
    _device_fields(src, dst)
    _require_location(dst, src.location, "Copy destination")
    utils.copy_field(src.data, dst.data)
    if src.halos_filled:
        dst.mark_halos_filled()
    else:
        dst.mark_halos_stale()


def interior_sum(field: Field) -> float:
    """Sum of a GPU field's interior values."""
    grid = _device_fields(field)
    return float(utils.interior_sum(field.data, grid.Nx, grid.Ny, grid.Nz))
