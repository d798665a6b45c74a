"""Error taxonomy for staggerfv.

Every error is a defect to fix before a simulation runs; none is retried or
caught inside the library.
"""


class StaggerError(Exception):
    """Base class for staggerfv errors."""
    pass


class IndexOutOfBoundsError(StaggerError, IndexError):
    """Logical index outside a field's padded range or a coordinate array."""
    pass


class UnsupportedLocationError(StaggerError, TypeError):
    """Operator has no stencil for the operand's location triple."""
    pass


class ArchitectureMismatchError(StaggerError, RuntimeError):
    """Buffer lives on a different compute target than the operator."""
    pass


class StaleHaloError(StaggerError, RuntimeError):
    """Halo regions read before boundary conditions refilled them (debug mode)."""
    pass
