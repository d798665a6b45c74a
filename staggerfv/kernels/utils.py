"""Utility kernels for accelerator fields.

Kernels loop over the interior ``1..N`` unless noted; halos are left to
boundary-condition code.
"""

import taichi as ti

from staggerfv.core.dtypes import DTYPE


@ti.kernel
def fill_interior(
    field: ti.template(), value: DTYPE, nx: ti.i32, ny: ti.i32, nz: ti.i32
):
    """Set interior values to a constant."""
    for i, j, k in ti.ndrange((1, nx + 1), (1, ny + 1), (1, nz + 1)):
        field[i, j, k] = value


@ti.kernel
def copy_field(src: ti.template(), dst: ti.template()):
    """Copy src to dst, halos included."""
    for I in ti.grouped(src):
        dst[I] = src[I]


@ti.kernel
def interior_sum(field: ti.template(), nx: ti.i32, ny: ti.i32, nz: ti.i32) -> DTYPE:
    """Sum of interior values."""
    total = ti.cast(0.0, DTYPE)
    for i, j, k in ti.ndrange((1, nx + 1), (1, ny + 1), (1, nz + 1)):
        total += field[i, j, k]
    return total
