"""Type definitions for staggerfv.

DTYPE is the default floating-point type of grids and fields. Double precision
keeps interpolation of integer-valued test fields exact; single precision is
available through the grid's ``float_type`` for accelerator runs.
"""

import numpy as np
import taichi as ti

# Default floating-point type for all fields and computations
DTYPE = ti.f64

# Taichi primitive types and their numpy equivalents for host buffers
_NUMPY_DTYPES = (
    (ti.f32, np.float32),
    (ti.f64, np.float64),
    (ti.i32, np.int32),
    (ti.i64, np.int64),
)


def _is_numpy_like(dtype) -> bool:
    return isinstance(dtype, (np.dtype, str, type))


def to_numpy_dtype(dtype) -> np.dtype:
    """Map a Taichi primitive type (or a numpy dtype) to a numpy dtype.

    Args:
        dtype: Taichi primitive type such as ti.f64, or anything np.dtype accepts

    Returns:
        Equivalent numpy dtype

    Raises:
        TypeError: If the type has no numpy equivalent
    """
    if _is_numpy_like(dtype):
        return np.dtype(dtype)
    for ti_type, np_type in _NUMPY_DTYPES:
        if dtype == ti_type:
            return np.dtype(np_type)
    raise TypeError(f"Unsupported element type: {dtype}")


def to_taichi_dtype(dtype):
    """Map a numpy dtype (or a Taichi primitive type) to a Taichi type."""
    if not _is_numpy_like(dtype):
        for ti_type, _ in _NUMPY_DTYPES:
            if dtype == ti_type:
                return ti_type
        raise TypeError(f"Unsupported element type: {dtype}")
    np_dtype = np.dtype(dtype)
    for ti_type, np_type in _NUMPY_DTYPES:
        if np_dtype == np.dtype(np_type):
            return ti_type
    raise TypeError(f"Unsupported element type: {dtype}")
