"""Host stencil operators for staggered fields.

Every operator has the signature ``op(i, j, k, grid, f, *args)`` and returns
one value at logical index (i, j, k). Operands are CPU Fields, offset arrays,
or other operators (composition). Accelerator fields go through
``staggerfv.kernels`` instead.
"""

from staggerfv.operators.differences import (
    difference_x_cell_to_face,
    difference_x_face_to_cell,
    difference_y_cell_to_face,
    difference_y_face_to_cell,
    difference_z_cell_to_face,
    difference_z_face_to_cell,
)
from staggerfv.operators.fluxes import area_flux_x, area_flux_y, area_flux_z
from staggerfv.operators.interpolation import (
    interpolate_x_cell_to_face,
    interpolate_x_face_to_cell,
    interpolate_y_cell_to_face,
    interpolate_y_face_to_cell,
    interpolate_z_cell_to_face,
    interpolate_z_face_to_cell,
)
from staggerfv.operators.stencils import compute_interior, host_data, interior_indices

__all__ = [
    "interpolate_x_cell_to_face",
    "interpolate_x_face_to_cell",
    "interpolate_y_cell_to_face",
    "interpolate_y_face_to_cell",
    "interpolate_z_cell_to_face",
    "interpolate_z_face_to_cell",
    "difference_x_cell_to_face",
    "difference_x_face_to_cell",
    "difference_y_cell_to_face",
    "difference_y_face_to_cell",
    "difference_z_cell_to_face",
    "difference_z_face_to_cell",
    "area_flux_x",
    "area_flux_y",
    "area_flux_z",
    "compute_interior",
    "host_data",
    "interior_indices",
]
