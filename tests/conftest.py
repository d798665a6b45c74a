"""Pytest fixtures and test utilities for staggerfv."""

import numpy as np
import pytest

from staggerfv.config import init_taichi
from staggerfv.core.architectures import Architecture
from staggerfv.core.grid import RegularCartesianGrid


@pytest.fixture(scope="session", autouse=True)
def taichi_init():
    """Initialize Taichi once per test session with CPU backend.

    Debug mode also enables the halo freshness guard, so tests must refill
    halos (fill_periodic) after setting interiors.
    """
    init_taichi(backend="cpu", debug=True)
    yield


@pytest.fixture
def grid_factory():
    """Factory for regular grids of various sizes."""
    return make_grid


def make_grid(size=(8, 1, 1), length=None, halo=(1, 1, 1), origin=None):
    """Regular grid with unit spacing unless a length is given."""
    if length is None:
        length = tuple(float(n) for n in size)
    return RegularCartesianGrid(size=size, length=length, halo=halo, origin=origin)


@pytest.fixture
def fill_periodic():
    """Fill halos periodically on every axis."""
    return fill_periodic_halos


def fill_periodic_halos(field):
    """Copy opposite interior edges into the halos, then mark them filled.

    Works for CPU and GPU fields. On a regular periodic grid, Face N+1
    coincides with Face 1, so the same copy serves Cell and Face axes.
    """
    grid = field.grid
    arr = field.to_numpy()
    for axis, (n, h) in enumerate(zip(grid.size, grid.halo)):
        if h == 0:
            continue
        if h > n:
            raise ValueError(f"Halo {h} wider than interior {n} on axis {axis}")
        lower, lower_src = [slice(None)] * 3, [slice(None)] * 3
        upper, upper_src = [slice(None)] * 3, [slice(None)] * 3
        lower[axis], lower_src[axis] = slice(0, h), slice(n, n + h)
        upper[axis], upper_src[axis] = slice(n + h, n + 2 * h), slice(h, 2 * h)
        arr[tuple(lower)] = arr[tuple(lower_src)]
        arr[tuple(upper)] = arr[tuple(upper_src)]

    if field.architecture is Architecture.CPU:
        field.parent[...] = arr
    else:
        field.data.from_numpy(arr)
    field.mark_halos_filled()


@pytest.fixture
def random_fields():
    """Fill fields with reproducible random interiors and periodic halos."""
    return set_random_periodic


def set_random_periodic(*fields, seed: int = 0):
    rng = np.random.default_rng(seed)
    for f in fields:
        f.set(rng.standard_normal(f.size))
        fill_periodic_halos(f)


@pytest.fixture
def assert_conserved():
    """Assert a domain integral is unchanged within tolerance."""
    return check_conserved


def check_conserved(initial: float, final: float, rtol: float = 1e-12, atol: float = 1e-12):
    diff = abs(final - initial)
    tol = atol + rtol * abs(initial)
    if diff > tol:
        raise AssertionError(
            f"Integral not conserved!\n"
            f"  Initial: {initial:.16e}\n"
            f"  Final:   {final:.16e}\n"
            f"  Difference: {diff:.3e} (tolerance: {tol:.3e})"
        )
