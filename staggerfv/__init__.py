"""
staggerfv: staggered-grid fields and finite-volume operators using Taichi.

The discretization core of an Arakawa C-grid ocean/fluid model: halo-padded
fields on host or accelerator memory, plus the interpolation, difference and
advective flux stencils used to assemble tendencies.
"""

__version__ = "0.1.0"

from staggerfv.core import (
    Architecture,
    Cell,
    Face,
    RegularCartesianGrid,
)
from staggerfv.errors import (
    ArchitectureMismatchError,
    IndexOutOfBoundsError,
    StaleHaloError,
    StaggerError,
    UnsupportedLocationError,
)
from staggerfv.fields import (
    CellField,
    Field,
    XFaceField,
    YFaceField,
    ZFaceField,
    zeros,
)

__all__ = [
    "__version__",
    "Architecture",
    "Cell",
    "Face",
    "RegularCartesianGrid",
    "Field",
    "CellField",
    "XFaceField",
    "YFaceField",
    "ZFaceField",
    "zeros",
    "StaggerError",
    "IndexOutOfBoundsError",
    "UnsupportedLocationError",
    "ArchitectureMismatchError",
    "StaleHaloError",
]
