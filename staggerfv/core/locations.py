"""Staggered-grid location markers.

A quantity sampled on an Arakawa C-grid sits either at the center of a cell
or on one of its faces along each axis. ``Cell`` and ``Face`` are marker
classes, never instantiated; a field's location is the triple
``(Lx, Ly, Lz)`` of markers, compared by identity.

    Cell(i-1)   Face(i)   Cell(i)   Face(i+1)
        o----------|---------o----------|

Face ``i`` sits between Cell ``i-1`` and Cell ``i``.
"""

from staggerfv.errors import UnsupportedLocationError

AXES = ("x", "y", "z")


class Location:
    """Base class of the location markers."""

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} is a location marker and cannot be instantiated")


class Cell(Location):
    """Location at the center of a grid cell."""


class Face(Location):
    """Location at the face of a grid cell."""


def is_location(marker) -> bool:
    """Check whether ``marker`` is Cell or Face."""
    return marker is Cell or marker is Face


def validate_location(location) -> tuple:
    """Validate and normalize a location triple.

    Args:
        location: Sequence of three markers, each Cell or Face

    Returns:
        The location as a tuple

    Raises:
        UnsupportedLocationError: If it is not a triple of markers
    """
    try:
        location = tuple(location)
    except TypeError:
        raise UnsupportedLocationError(
            f"Location must be a triple of Cell/Face, got {location!r}"
        ) from None
    if len(location) != 3 or not all(is_location(loc) for loc in location):
        raise UnsupportedLocationError(
            f"Location must be a triple of Cell/Face, got {location_name(location)}"
        )
    return location


def axis_index(axis) -> int:
    """Normalize an axis given as 0/1/2 or 'x'/'y'/'z'."""
    if axis in AXES:
        return AXES.index(axis)
    if axis in (0, 1, 2):
        return int(axis)
    raise ValueError(f"axis must be 0, 1, 2 or one of {AXES}, got {axis!r}")


def location_name(location) -> str:
    """Human-readable form of a location triple, e.g. '(Face, Cell, Cell)'."""
    names = [getattr(loc, "__name__", repr(loc)) for loc in location]
    return "(" + ", ".join(names) + ")"


# Canonical C-grid placements
CENTER = (Cell, Cell, Cell)
X_FACE = (Face, Cell, Cell)
Y_FACE = (Cell, Face, Cell)
Z_FACE = (Cell, Cell, Face)
