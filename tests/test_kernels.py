"""Tests for Taichi kernels on accelerator fields.

Device results are compared against the host operators on the same data.
The Taichi runtime runs on its CPU backend in the test session.
"""

import numpy as np
import pytest

from staggerfv.advection import centered_second_order, div_Uc, div_Uu, div_Uv, div_Uw
from staggerfv.core.architectures import Architecture
from staggerfv.core.locations import Cell, Face
from staggerfv.errors import (
    ArchitectureMismatchError,
    StaleHaloError,
    UnsupportedLocationError,
)
from staggerfv.fields import CellField, Field, XFaceField, YFaceField, ZFaceField
from staggerfv.kernels import (
    compute_momentum_advection,
    compute_tracer_advection,
    copy_field,
    fill_interior,
    interior_sum,
    interpolate,
)
from staggerfv.operators import (
    compute_interior,
    interpolate_x_cell_to_face,
    interpolate_y_face_to_cell,
    interpolate_z_cell_to_face,
)

GPU = Architecture.GPU


@pytest.fixture
def host_state(grid_factory, random_fields):
    """Random periodic velocity and tracer on the host."""
    grid = grid_factory(size=(5, 4, 3), length=(1.0, 2.0, 0.5))
    U = XFaceField(Architecture.CPU, grid)
    V = YFaceField(Architecture.CPU, grid)
    W = ZFaceField(Architecture.CPU, grid)
    c = CellField(Architecture.CPU, grid)
    random_fields(U, V, W, c, seed=3)
    return grid, U, V, W, c


def on_device(*fields):
    return tuple(f.to_architecture(GPU) for f in fields)


class TestInterpolateKernel:
    """Tests for the device interpolation kernel."""

    def test_cell_to_face_x(self, host_state):
        grid, U, V, W, c = host_state
        (c_d,) = on_device(c)
        u_d = XFaceField(GPU, grid)
        interpolate(c_d, u_d, "x")
        expected = compute_interior(interpolate_x_cell_to_face, grid, c)
        np.testing.assert_allclose(u_d.interior(), expected, rtol=1e-12, atol=1e-14)
        assert not u_d.halos_filled

    def test_face_to_cell_y(self, host_state):
        grid, U, V, W, c = host_state
        (V_d,) = on_device(V)
        out = CellField(GPU, grid)
        interpolate(V_d, out, 1)
        expected = compute_interior(interpolate_y_face_to_cell, grid, V)
        np.testing.assert_allclose(out.interior(), expected, rtol=1e-12, atol=1e-14)

    def test_cell_to_face_z(self, host_state):
        grid, U, V, W, c = host_state
        (U_d,) = on_device(U)
        out = Field((Face, Cell, Face), GPU, grid)
        interpolate(U_d, out, "z")
        expected = compute_interior(interpolate_z_cell_to_face, grid, U)
        np.testing.assert_allclose(out.interior(), expected, rtol=1e-12, atol=1e-14)

    def test_wrong_destination(self, host_state):
        """dst must be src shifted along the interpolation axis."""
        grid, U, V, W, c = host_state
        (c_d,) = on_device(c)
        with pytest.raises(UnsupportedLocationError):
            interpolate(c_d, YFaceField(GPU, grid), "x")

    def test_host_fields_rejected(self, host_state):
        grid, U, V, W, c = host_state
        with pytest.raises(ArchitectureMismatchError):
            interpolate(c, XFaceField(Architecture.CPU, grid), "x")

    def test_stale_source(self, grid_factory):
        grid = grid_factory(size=(4, 1, 1))
        c = CellField(GPU, grid)
        c.set(1.0)
        with pytest.raises(StaleHaloError):
            interpolate(c, XFaceField(GPU, grid), "x")

    def test_needs_halo(self, grid_factory):
        grid = grid_factory(size=(4, 1, 1), halo=(0, 1, 1))
        with pytest.raises(ValueError, match="halo"):
            interpolate(CellField(GPU, grid), XFaceField(GPU, grid), "x")


class TestAdvectionKernels:
    """Tests for device advection against the host operators."""

    def test_tracer_advection_matches_host(self, host_state):
        grid, U, V, W, c = host_state
        U_d, V_d, W_d, c_d = on_device(U, V, W, c)
        G = CellField(GPU, grid)
        compute_tracer_advection(G, U_d, V_d, W_d, c_d)
        expected = compute_interior(div_Uc, grid, centered_second_order, U, V, W, c)
        np.testing.assert_allclose(G.interior(), expected, rtol=1e-10, atol=1e-12)
        assert not G.halos_filled

    def test_tracer_advection_conserves(self, host_state, assert_conserved):
        grid, U, V, W, c = host_state
        U_d, V_d, W_d, c_d = on_device(U, V, W, c)
        G = CellField(GPU, grid)
        compute_tracer_advection(G, U_d, V_d, W_d, c_d)
        assert_conserved(0.0, interior_sum(G) * grid.volume(1, 1, 1), atol=1e-10)

    def test_momentum_advection_matches_host(self, host_state):
        grid, U, V, W, c = host_state
        U_d, V_d, W_d = on_device(U, V, W)
        Gu, Gv, Gw = XFaceField(GPU, grid), YFaceField(GPU, grid), ZFaceField(GPU, grid)
        compute_momentum_advection(Gu, Gv, Gw, U_d, V_d, W_d)
        for G, op, q in ((Gu, div_Uu, U), (Gv, div_Uv, V), (Gw, div_Uw, W)):
            expected = compute_interior(op, grid, centered_second_order, U, V, W, q)
            np.testing.assert_allclose(G.interior(), expected, rtol=1e-10, atol=1e-12)

    def test_wrong_tracer_location(self, host_state):
        grid, U, V, W, c = host_state
        U_d, V_d, W_d = on_device(U, V, W)
        with pytest.raises(UnsupportedLocationError):
            compute_tracer_advection(CellField(GPU, grid), U_d, V_d, W_d, XFaceField(GPU, grid))

    def test_mixed_grids(self, host_state, grid_factory):
        """All fields of a launch share one grid."""
        grid, U, V, W, c = host_state
        U_d, V_d, W_d, c_d = on_device(U, V, W, c)
        other = grid_factory(size=(5, 4, 3), length=(1.0, 2.0, 0.5))
        with pytest.raises(ValueError, match="share one grid"):
            compute_tracer_advection(CellField(GPU, other), U_d, V_d, W_d, c_d)

    def test_stale_velocity(self, host_state):
        grid, U, V, W, c = host_state
        U_d, V_d, W_d, c_d = on_device(U, V, W, c)
        U_d.mark_halos_stale()
        with pytest.raises(StaleHaloError):
            compute_tracer_advection(CellField(GPU, grid), U_d, V_d, W_d, c_d)

    def test_unsupported_scheme(self, host_state):
        grid, U, V, W, c = host_state
        U_d, V_d, W_d, c_d = on_device(U, V, W, c)
        with pytest.raises(NotImplementedError):
            compute_tracer_advection(CellField(GPU, grid), U_d, V_d, W_d, c_d, scheme=object())


class TestUtilityKernels:
    """Tests for fill, copy and reduction kernels."""

    def test_fill_and_sum(self, grid_factory):
        grid = grid_factory(size=(4, 3, 2))
        f = CellField(GPU, grid)
        fill_interior(f, 1.5)
        assert interior_sum(f) == pytest.approx(1.5 * grid.n_cells)
        assert f[0, 1, 1] == 0.0
        assert not f.halos_filled

    def test_sum_ignores_halos(self, grid_factory):
        grid = grid_factory(size=(4, 3, 2))
        f = CellField(GPU, grid)
        f[2, 2, 1] = -3.0
        f[0, 1, 1] = 10.0  # halo, ignored
        assert interior_sum(f) == pytest.approx(-3.0)

    def test_copy(self, host_state):
        grid, U, V, W, c = host_state
        (c_d,) = on_device(c)
        dst = CellField(GPU, grid)
        copy_field(c_d, dst)
        np.testing.assert_array_equal(dst.to_numpy(), c.to_numpy())
        assert dst.halos_filled

    def test_copy_location_mismatch(self, grid_factory):
        grid = grid_factory(size=(2, 2, 2))
        with pytest.raises(UnsupportedLocationError):
            copy_field(CellField(GPU, grid), XFaceField(GPU, grid))

    def test_host_field_rejected(self, grid_factory):
        with pytest.raises(ArchitectureMismatchError):
            interior_sum(CellField(Architecture.CPU, grid_factory()))
