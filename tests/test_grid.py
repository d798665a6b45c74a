"""Tests for RegularCartesianGrid."""

import numpy as np
import pytest

from staggerfv.core.grid import Grid, RegularCartesianGrid


class TestRegularCartesianGrid:
    """Tests for grid dimensions and coordinates."""

    @pytest.fixture
    def grid(self):
        return RegularCartesianGrid(size=(4, 2, 5), length=(8.0, 1.0, 10.0), halo=(1, 2, 3))

    def test_dimensions(self, grid):
        """Per-axis accessors unpack size, halo and length."""
        assert (grid.Nx, grid.Ny, grid.Nz) == (4, 2, 5)
        assert (grid.Hx, grid.Hy, grid.Hz) == (1, 2, 3)
        assert (grid.Lx, grid.Ly, grid.Lz) == (8.0, 1.0, 10.0)
        assert grid.n_cells == 40

    def test_spacing(self, grid):
        """Spacing is length over cell count."""
        assert grid.dx == pytest.approx(2.0)
        assert grid.dy == pytest.approx(0.5)
        assert grid.dz == pytest.approx(2.0)

    def test_padded_shape(self, grid):
        """Halos pad both sides of every axis."""
        assert grid.padded_shape == (6, 6, 11)

    def test_default_origin(self, grid):
        """z runs from -Lz up to the surface."""
        assert grid.origin == (0.0, 0.0, -10.0)
        assert grid.zF[1] == pytest.approx(-10.0)
        assert grid.zF[grid.Nz + 1] == pytest.approx(0.0)

    def test_explicit_origin(self):
        """Origin shifts every coordinate."""
        grid = RegularCartesianGrid(size=(2, 1, 1), length=(1.0, 1.0, 1.0), origin=(5, 0, 0))
        assert grid.xF[1] == pytest.approx(5.0)
        assert grid.xC[1] == pytest.approx(5.25)

    def test_coordinate_lengths(self, grid):
        """N centers and N+1 faces, both 1-based."""
        assert grid.xC.axes == (range(1, 5),)
        assert grid.xF.axes == (range(1, 6),)
        assert len(grid.yC) == 2
        assert len(grid.yF) == 3

    def test_centers_between_faces(self, grid):
        """Face i sits below center i, which sits below face i+1."""
        for i in range(1, grid.Nx + 1):
            assert grid.xF[i] < grid.xC[i] < grid.xF[i + 1]
            assert grid.xC[i] == pytest.approx(0.5 * (grid.xF[i] + grid.xF[i + 1]))

    def test_coordinates_one_based(self, grid):
        """Index 0 is outside the coordinate arrays."""
        with pytest.raises(IndexError):
            grid.xC[0]

    def test_metrics(self, grid):
        """Areas and volumes are uniform."""
        assert grid.area_x(1, 1, 1) == pytest.approx(1.0)
        assert grid.area_y(3, 2, 1) == pytest.approx(4.0)
        assert grid.area_z(1, 1, 5) == pytest.approx(1.0)
        assert grid.volume(2, 2, 2) == pytest.approx(2.0)

    def test_normalized_tuples(self):
        """Lists normalize to tuples of the right types."""
        grid = RegularCartesianGrid(size=[2, 2, 2], length=[1, 1, 1], halo=[1, 1, 1])
        assert grid.size == (2, 2, 2)
        assert grid.length == (1.0, 1.0, 1.0)
        assert isinstance(grid.length[0], float)

    def test_immutable(self, grid):
        """Grids are frozen."""
        with pytest.raises(AttributeError):
            grid.size = (1, 1, 1)

    def test_satisfies_protocol(self, grid):
        """The regular grid fulfils the Grid contract."""
        assert isinstance(grid, Grid)

    def test_float_type(self):
        """Coordinates use the grid's float type."""
        grid = RegularCartesianGrid(size=(2, 2, 2), length=(1, 1, 1), float_type=np.float32)
        assert grid.xC.dtype == np.float32

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"size": (0, 1, 1), "length": (1, 1, 1)},
            {"size": (1, 1, 1), "length": (1, 0, 1)},
            {"size": (1, 1, 1), "length": (1, 1, 1), "halo": (1, -1, 1)},
            {"size": (1, 1), "length": (1, 1, 1)},
            {"size": (1, 1, 1), "length": (1, 1, 1), "origin": (0, 0)},
        ],
    )
    def test_invalid(self, kwargs):
        """Invalid dimensions are rejected."""
        with pytest.raises(ValueError):
            RegularCartesianGrid(**kwargs)
