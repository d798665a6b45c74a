"""
Taichi kernels for accelerator (GPU architecture) fields.

Usage:
    from staggerfv.kernels import compute_tracer_advection

    compute_tracer_advection(G, U, V, W, c)   # G = div(U c) on the device

Submodules:
- stencils: @ti.func stencils mirroring staggerfv.operators
- advection: @ti.kernel interpolation and advection loops
- utils: fill, copy and reduction kernels
- launch: Python-scope launchers that validate Fields before dispatch
"""

from staggerfv.kernels.launch import (
    compute_momentum_advection,
    compute_tracer_advection,
    copy_field,
    fill_interior,
    interior_sum,
    interpolate,
)

__all__ = [
    "interpolate",
    "compute_tracer_advection",
    "compute_momentum_advection",
    "fill_interior",
    "copy_field",
    "interior_sum",
]
