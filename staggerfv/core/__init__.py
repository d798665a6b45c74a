"""Core infrastructure: architectures, locations, types, offset arrays, grids."""

from staggerfv.core.architectures import CPU, GPU, Architecture, architecture_of
from staggerfv.core.dtypes import DTYPE, to_numpy_dtype, to_taichi_dtype
from staggerfv.core.grid import Grid, RegularCartesianGrid
from staggerfv.core.locations import (
    AXES,
    CENTER,
    X_FACE,
    Y_FACE,
    Z_FACE,
    Cell,
    Face,
    Location,
    axis_index,
    is_location,
    location_name,
    validate_location,
)
from staggerfv.core.offset_array import OffsetArray

__all__ = [
    "Architecture",
    "CPU",
    "GPU",
    "architecture_of",
    "DTYPE",
    "to_numpy_dtype",
    "to_taichi_dtype",
    "Grid",
    "RegularCartesianGrid",
    "AXES",
    "CENTER",
    "X_FACE",
    "Y_FACE",
    "Z_FACE",
    "Cell",
    "Face",
    "Location",
    "axis_index",
    "is_location",
    "location_name",
    "validate_location",
    "OffsetArray",
]
