"""
Advection schemes and flux-form advection terms.

Usage:
    from staggerfv.advection import centered_second_order, div_Uc

    tendency = -div_Uc(i, j, k, grid, centered_second_order, U, V, W, c)

Schemes are looked up by configuration name with get_scheme().
"""

from staggerfv.advection.centered_second_order import (
    CenteredSecondOrder,
    centered_second_order,
)
from staggerfv.advection.divergence import div_Uc, div_Uu, div_Uv, div_Uw
from staggerfv.advection.protocol import AdvectionScheme

_SCHEMES: dict[str, AdvectionScheme] = {
    CenteredSecondOrder.name: centered_second_order,
}


def get_scheme(name: str) -> AdvectionScheme:
    """Get an advection scheme by name.

    Raises:
        KeyError: If no scheme is registered under that name
    """
    if name not in _SCHEMES:
        raise KeyError(
            f"No advection scheme registered as '{name}'. "
            f"Available: {list(_SCHEMES.keys())}"
        )
    return _SCHEMES[name]


def available_schemes() -> list[str]:
    """Names accepted by get_scheme()."""
    return list(_SCHEMES.keys())


__all__ = [
    "AdvectionScheme",
    "CenteredSecondOrder",
    "centered_second_order",
    "div_Uc",
    "div_Uu",
    "div_Uv",
    "div_Uw",
    "get_scheme",
    "available_schemes",
]
