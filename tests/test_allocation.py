"""Tests for architecture-dispatched allocation."""

import numpy as np
import pytest
import taichi as ti

from staggerfv.core.architectures import Architecture, architecture_of
from staggerfv.core.offset_array import OffsetArray
from staggerfv.errors import ArchitectureMismatchError
from staggerfv.fields.allocation import (
    Allocator,
    DeviceAllocator,
    HostAllocator,
    get_allocator,
    halo_offsets,
    padded_shape,
    zeros,
)


class TestHelpers:
    """Tests for halo geometry helpers."""

    def test_halo_offsets(self, grid_factory):
        grid = grid_factory(size=(4, 3, 2), halo=(2, 1, 0))
        assert halo_offsets(grid) == (-1, 0, 1)

    def test_padded_shape(self, grid_factory):
        grid = grid_factory(size=(4, 3, 2), halo=(2, 1, 0))
        assert padded_shape(grid) == (8, 5, 2)


class TestRegistry:
    """Tests for allocator dispatch."""

    def test_dispatch(self):
        """Each architecture has its allocator."""
        assert isinstance(get_allocator(Architecture.CPU), HostAllocator)
        assert isinstance(get_allocator(Architecture.GPU), DeviceAllocator)

    def test_protocol(self):
        """Allocators satisfy the Allocator protocol."""
        for arch in Architecture:
            assert isinstance(get_allocator(arch), Allocator)

    def test_unknown_architecture(self):
        """Unknown targets are rejected."""
        with pytest.raises(ArchitectureMismatchError):
            get_allocator("tpu")


class TestHostZeros:
    """Tests for CPU allocation."""

    def test_shape_and_offsets(self, grid_factory):
        """Host buffers are padded and shifted by the halo."""
        grid = grid_factory(size=(4, 3, 2), halo=(1, 2, 1))
        buf = zeros(Architecture.CPU, grid)
        assert isinstance(buf, OffsetArray)
        assert buf.shape == (6, 7, 4)
        assert buf.axes == (range(0, 6), range(-1, 6), range(0, 4))

    def test_all_zero(self, grid_factory):
        """Every element, halos included, is zero."""
        buf = zeros(Architecture.CPU, grid_factory(size=(3, 3, 3)))
        assert not np.any(buf.parent)

    def test_default_dtype(self, grid_factory):
        """Element type defaults to the grid's float type."""
        buf = zeros(Architecture.CPU, grid_factory())
        assert buf.dtype == np.float64

    def test_explicit_dtype(self, grid_factory):
        buf = zeros(Architecture.CPU, grid_factory(), dtype=np.float32)
        assert buf.dtype == np.float32

    def test_first_halo_cell(self, grid_factory):
        """Logical index 1 - H addresses the first halo cell."""
        grid = grid_factory(size=(4, 4, 4), halo=(2, 2, 2))
        buf = zeros(Architecture.CPU, grid)
        buf[-1, -1, -1] = 3.0
        assert buf.parent[0, 0, 0] == 3.0

    def test_staging_extents(self, grid_factory):
        """Explicit extents give an unshifted buffer."""
        buf = zeros(Architecture.CPU, grid_factory(), extents=(2, 3, 4))
        assert isinstance(buf, np.ndarray)
        assert buf.shape == (2, 3, 4)
        assert not np.any(buf)


class TestDeviceZeros:
    """Tests for GPU allocation (Taichi runtime memory)."""

    def test_device_buffer(self, grid_factory):
        """Device buffers are offset Taichi fields."""
        grid = grid_factory(size=(4, 3, 2), halo=(1, 1, 1))
        buf = zeros(Architecture.GPU, grid)
        assert isinstance(buf, ti.Field)
        assert architecture_of(buf) is Architecture.GPU
        assert tuple(buf.shape) == (6, 5, 4)

    def test_device_zeroed(self, grid_factory):
        """Device buffers are cleared before use."""
        buf = zeros(Architecture.GPU, grid_factory(size=(3, 2, 2)))
        assert not np.any(buf.to_numpy())

    def test_device_logical_indexing(self, grid_factory):
        """Logical index 0 is the first halo cell on device too."""
        grid = grid_factory(size=(3, 3, 3), halo=(1, 1, 1))
        buf = zeros(Architecture.GPU, grid)
        buf[0, 0, 0] = 2.0
        assert buf.to_numpy()[0, 0, 0] == 2.0

    def test_device_staging(self, grid_factory):
        """Staging buffers on device are plain fields."""
        buf = zeros(Architecture.GPU, grid_factory(), extents=(2, 2, 2))
        assert tuple(buf.shape) == (2, 2, 2)
        assert not np.any(buf.to_numpy())
