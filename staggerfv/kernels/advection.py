"""Taichi kernels for interpolation and flux-form advection.

Each kernel is one parallel loop over the interior, one independent stencil
evaluation per index. Which stencil runs is fixed at compile time through
template arguments, so the loop body carries no location branches.
"""

import taichi as ti

from staggerfv.core.dtypes import DTYPE
from staggerfv.kernels import stencils


@ti.kernel
def interpolate_kernel(
    src: ti.template(),
    dst: ti.template(),
    axis: ti.template(),
    to_face: ti.template(),
    nx: ti.i32,
    ny: ti.i32,
    nz: ti.i32,
):
    """Shift src half a cell along ``axis`` into dst.

    to_face=True averages (I - e, I); to_face=False averages (I, I + e).
    """
    for I in ti.grouped(ti.ndrange((1, nx + 1), (1, ny + 1), (1, nz + 1))):
        e = ti.Vector.unit(3, axis, ti.i32)
        if ti.static(to_face):
            dst[I] = 0.5 * (src[I - e] + src[I])
        else:
            dst[I] = 0.5 * (src[I] + src[I + e])


@ti.kernel
def tracer_advection_kernel(
    G: ti.template(),
    U: ti.template(),
    V: ti.template(),
    W: ti.template(),
    c: ti.template(),
    nx: ti.i32,
    ny: ti.i32,
    nz: ti.i32,
    Ax: DTYPE,
    Ay: DTYPE,
    Az: DTYPE,
    vol: DTYPE,
):
    """G = div(U c) at cell centers."""
    ti.loop_config(block_dim=256)
    for i, j, k in ti.ndrange((1, nx + 1), (1, ny + 1), (1, nz + 1)):
        G[i, j, k] = stencils.div_Uc(U, V, W, c, i, j, k, Ax, Ay, Az, vol)


@ti.kernel
def momentum_advection_kernel(
    Gu: ti.template(),
    Gv: ti.template(),
    Gw: ti.template(),
    U: ti.template(),
    V: ti.template(),
    W: ti.template(),
    nx: ti.i32,
    ny: ti.i32,
    nz: ti.i32,
    Ax: DTYPE,
    Ay: DTYPE,
    Az: DTYPE,
    vol: DTYPE,
):
    """(Gu, Gv, Gw) = div(U u), div(U v), div(U w) at the velocity faces."""
    ti.loop_config(block_dim=256)
    for i, j, k in ti.ndrange((1, nx + 1), (1, ny + 1), (1, nz + 1)):
        Gu[i, j, k] = stencils.div_Uu(U, V, W, U, i, j, k, Ax, Ay, Az, vol)
        Gv[i, j, k] = stencils.div_Uv(U, V, W, V, i, j, k, Ax, Ay, Az, vol)
        Gw[i, j, k] = stencils.div_Uw(U, V, W, W, i, j, k, Ax, Ay, Az, vol)
