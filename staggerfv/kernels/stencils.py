"""Taichi stencil functions for the accelerator path.

Device counterparts of ``staggerfv.operators`` and the centered second-order
fluxes, called from inside kernels with logical indices. Field arguments are
offset Taichi fields, so ``f[0, j, k]`` reads the first halo cell.

Metrics enter as scalars: the kernels target grids with uniform face areas
and cell volumes, where interpolating ``Ax * U`` equals ``Ax`` times the
interpolated ``U``.
"""

import taichi as ti


# =============================================================================
# Interpolation
# =============================================================================


@ti.func
def interpolate_x_cell_to_face(f: ti.template(), i, j, k):
    return 0.5 * (f[i - 1, j, k] + f[i, j, k])


@ti.func
def interpolate_x_face_to_cell(f: ti.template(), i, j, k):
    return 0.5 * (f[i, j, k] + f[i + 1, j, k])


@ti.func
def interpolate_y_cell_to_face(f: ti.template(), i, j, k):
    return 0.5 * (f[i, j - 1, k] + f[i, j, k])


@ti.func
def interpolate_y_face_to_cell(f: ti.template(), i, j, k):
    return 0.5 * (f[i, j, k] + f[i, j + 1, k])


@ti.func
def interpolate_z_cell_to_face(f: ti.template(), i, j, k):
    return 0.5 * (f[i, j, k - 1] + f[i, j, k])


@ti.func
def interpolate_z_face_to_cell(f: ti.template(), i, j, k):
    return 0.5 * (f[i, j, k] + f[i, j, k + 1])


# =============================================================================
# Tracer fluxes through the x/y/z-faces of cell (i, j, k)
# =============================================================================


@ti.func
def advective_tracer_flux_x(U: ti.template(), c: ti.template(), i, j, k, Ax):
    return Ax * U[i, j, k] * interpolate_x_cell_to_face(c, i, j, k)


@ti.func
def advective_tracer_flux_y(V: ti.template(), c: ti.template(), i, j, k, Ay):
    return Ay * V[i, j, k] * interpolate_y_cell_to_face(c, i, j, k)


@ti.func
def advective_tracer_flux_z(W: ti.template(), c: ti.template(), i, j, k, Az):
    return Az * W[i, j, k] * interpolate_z_cell_to_face(c, i, j, k)


@ti.func
def div_Uc(
    U: ti.template(), V: ti.template(), W: ti.template(), c: ti.template(),
    i, j, k, Ax, Ay, Az, vol,
):
    return (
        advective_tracer_flux_x(U, c, i + 1, j, k, Ax) - advective_tracer_flux_x(U, c, i, j, k, Ax)
        + advective_tracer_flux_y(V, c, i, j + 1, k, Ay) - advective_tracer_flux_y(V, c, i, j, k, Ay)
        + advective_tracer_flux_z(W, c, i, j, k + 1, Az) - advective_tracer_flux_z(W, c, i, j, k, Az)
    ) / vol


# =============================================================================
# Momentum fluxes (same pairing as CenteredSecondOrder)
# =============================================================================


@ti.func
def advective_momentum_flux_Uu(U: ti.template(), u: ti.template(), i, j, k, Ax):
    return Ax * interpolate_x_face_to_cell(U, i, j, k) * interpolate_x_face_to_cell(u, i, j, k)


@ti.func
def advective_momentum_flux_Vu(V: ti.template(), u: ti.template(), i, j, k, Ay):
    return Ay * interpolate_x_cell_to_face(V, i, j, k) * interpolate_y_cell_to_face(u, i, j, k)


@ti.func
def advective_momentum_flux_Wu(W: ti.template(), u: ti.template(), i, j, k, Az):
    return Az * interpolate_x_cell_to_face(W, i, j, k) * interpolate_z_cell_to_face(u, i, j, k)


@ti.func
def advective_momentum_flux_Uv(U: ti.template(), v: ti.template(), i, j, k, Ax):
    return Ax * interpolate_y_cell_to_face(U, i, j, k) * interpolate_x_cell_to_face(v, i, j, k)


@ti.func
def advective_momentum_flux_Vv(V: ti.template(), v: ti.template(), i, j, k, Ay):
    return Ay * interpolate_y_face_to_cell(V, i, j, k) * interpolate_y_face_to_cell(v, i, j, k)


@ti.func
def advective_momentum_flux_Wv(W: ti.template(), v: ti.template(), i, j, k, Az):
    return Az * interpolate_y_cell_to_face(W, i, j, k) * interpolate_z_cell_to_face(v, i, j, k)


@ti.func
def advective_momentum_flux_Uw(U: ti.template(), w: ti.template(), i, j, k, Ax):
    return Ax * interpolate_z_cell_to_face(U, i, j, k) * interpolate_x_cell_to_face(w, i, j, k)


@ti.func
def advective_momentum_flux_Vw(V: ti.template(), w: ti.template(), i, j, k, Ay):
    return Ay * interpolate_z_cell_to_face(V, i, j, k) * interpolate_y_cell_to_face(w, i, j, k)


@ti.func
def advective_momentum_flux_Ww(W: ti.template(), w: ti.template(), i, j, k, Az):
    return Az * interpolate_z_face_to_cell(W, i, j, k) * interpolate_z_face_to_cell(w, i, j, k)


@ti.func
def div_Uu(
    U: ti.template(), V: ti.template(), W: ti.template(), u: ti.template(),
    i, j, k, Ax, Ay, Az, vol,
):
    return (
        advective_momentum_flux_Uu(U, u, i, j, k, Ax) - advective_momentum_flux_Uu(U, u, i - 1, j, k, Ax)
        + advective_momentum_flux_Vu(V, u, i, j + 1, k, Ay) - advective_momentum_flux_Vu(V, u, i, j, k, Ay)
        + advective_momentum_flux_Wu(W, u, i, j, k + 1, Az) - advective_momentum_flux_Wu(W, u, i, j, k, Az)
    ) / vol


@ti.func
def div_Uv(
    U: ti.template(), V: ti.template(), W: ti.template(), v: ti.template(),
    i, j, k, Ax, Ay, Az, vol,
):
    return (
        advective_momentum_flux_Uv(U, v, i + 1, j, k, Ax) - advective_momentum_flux_Uv(U, v, i, j, k, Ax)
        + advective_momentum_flux_Vv(V, v, i, j, k, Ay) - advective_momentum_flux_Vv(V, v, i, j - 1, k, Ay)
        + advective_momentum_flux_Wv(W, v, i, j, k + 1, Az) - advective_momentum_flux_Wv(W, v, i, j, k, Az)
    ) / vol


@ti.func
def div_Uw(
    U: ti.template(), V: ti.template(), W: ti.template(), w: ti.template(),
    i, j, k, Ax, Ay, Az, vol,
):
    return (
        advective_momentum_flux_Uw(U, w, i + 1, j, k, Ax) - advective_momentum_flux_Uw(U, w, i, j, k, Ax)
        + advective_momentum_flux_Vw(V, w, i, j + 1, k, Ay) - advective_momentum_flux_Vw(V, w, i, j, k, Ay)
        + advective_momentum_flux_Ww(W, w, i, j, k, Az) - advective_momentum_flux_Ww(W, w, i, j, k - 1, Az)
    ) / vol
