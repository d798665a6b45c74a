"""Staggered fields on halo-padded buffers.

Main classes:
- Field: Location-tagged buffer bound to a grid
- CellField, XFaceField, YFaceField, ZFaceField: Canonical C-grid placements

Allocation:
- zeros: Architecture-dispatched zero-filled buffers
- HostAllocator, DeviceAllocator: Per-architecture allocators

Coordinates:
- xnode/ynode/znode, node: Coordinate of one sample
- xnodes/ynodes/znodes, nodes: Broadcastable coordinate sequences
"""

from staggerfv.fields.allocation import (
    Allocator,
    DeviceAllocator,
    HostAllocator,
    get_allocator,
    halo_offsets,
    padded_shape,
    zeros,
)
from staggerfv.fields.base import (
    CellField,
    Field,
    XFaceField,
    YFaceField,
    ZFaceField,
)
from staggerfv.fields.nodes import (
    axis_nodes,
    field_node,
    node,
    nodes,
    xnode,
    xnodes,
    ynode,
    ynodes,
    znode,
    znodes,
)

__all__ = [
    # Core classes
    "Field",
    "CellField",
    "XFaceField",
    "YFaceField",
    "ZFaceField",
    # Allocation
    "Allocator",
    "HostAllocator",
    "DeviceAllocator",
    "get_allocator",
    "halo_offsets",
    "padded_shape",
    "zeros",
    # Coordinates
    "node",
    "xnode",
    "ynode",
    "znode",
    "field_node",
    "axis_nodes",
    "xnodes",
    "ynodes",
    "znodes",
    "nodes",
]
