"""Compute targets for allocation and kernel dispatch.

CPU buffers are numpy arrays in host memory. GPU buffers are Taichi fields in
memory owned by the Taichi runtime, which runs on CUDA, Vulkan or Metal (or on
its CPU backend when no accelerator is present, as in the test suite).
"""

from enum import Enum, auto

import numpy as np
import taichi as ti


class Architecture(Enum):
    """Where a field's buffer lives and where its stencils run.

    CPU: host-resident numpy buffers, evaluated by the per-cell operators
    GPU: accelerator-resident Taichi fields, evaluated by Taichi kernels
    """

    CPU = auto()
    GPU = auto()

    @classmethod
    def from_name(cls, name: str) -> "Architecture":
        """Parse a configuration name ('cpu' or 'gpu', any case)."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(
                f"Unknown architecture: {name}. "
                f"Available: {[a.name.lower() for a in cls]}"
            ) from None


CPU = Architecture.CPU
GPU = Architecture.GPU


def architecture_of(buffer) -> Architecture | None:
    """Infer the architecture a buffer lives on.

    Wrappers exposing ``parent`` (OffsetArray, Field) are unwrapped first.

    Returns:
        Architecture.CPU for numpy arrays, Architecture.GPU for Taichi
        fields, None for anything else
    """
    arch = getattr(buffer, "architecture", None)
    if isinstance(arch, Architecture):
        return arch
    if isinstance(buffer, np.ndarray):
        return Architecture.CPU
    if isinstance(buffer, ti.Field):
        return Architecture.GPU
    parent = getattr(buffer, "parent", None)
    if parent is not None and parent is not buffer:
        return architecture_of(parent)
    return None
