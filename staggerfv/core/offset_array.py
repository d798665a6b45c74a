"""Index-shift wrapper giving numpy buffers arbitrary lower index bounds.

Halo-padded fields are addressed with logical indices running from
``1 - H`` to ``N + H`` along each axis, so that index 1 is the first interior
cell. ``OffsetArray`` stores the raw 0-based buffer plus a fixed per-axis
offset and translates every access. Out-of-range indices raise instead of
wrapping, including negative indices that numpy would count from the end.
"""

import numbers

import numpy as np

from staggerfv.core.architectures import Architecture
from staggerfv.errors import IndexOutOfBoundsError


def shift_index(i, axis: int, valid: range):
    """0-based position of logical index ``i`` within ``valid``.

    ``i`` is an integer or an integer array (one index per sweep point);
    every entry must lie in ``valid``.
    """
    if isinstance(i, np.ndarray) and np.issubdtype(i.dtype, np.integer):
        lo, hi = (int(i.min()), int(i.max())) if i.size else (valid.start, valid.start)
    elif isinstance(i, numbers.Integral):
        lo = hi = int(i)
    else:
        raise TypeError(f"Indices must be integers, got {i!r} on axis {axis}")
    if lo < valid.start or hi >= valid.stop:
        bad = lo if lo < valid.start else hi
        raise IndexOutOfBoundsError(
            f"Index {bad} out of bounds on axis {axis}: "
            f"valid range is [{valid.start}, {valid.stop - 1}]"
        )
    return i - valid.start


class OffsetArray:
    """A numpy array addressed by logical indices starting at ``offsets``.

    Attributes:
        parent: The underlying 0-based numpy array
        offsets: Logical index of ``parent[0, ..., 0]`` along each axis

    Example:
        a = OffsetArray(np.zeros((6, 6, 6)), (0, 0, 0))  # indices 0..5
        a[0, 5, 3] = 1.0
    """

    architecture = Architecture.CPU

    def __init__(self, parent: np.ndarray, offsets: tuple[int, ...]):
        parent = np.asarray(parent)
        offsets = tuple(int(o) for o in offsets)
        if len(offsets) != parent.ndim:
            raise ValueError(
                f"Need one offset per dimension: {parent.ndim} dims, "
                f"got offsets {offsets}"
            )
        self._parent = parent
        self._offsets = offsets

    @property
    def parent(self) -> np.ndarray:
        """Underlying 0-based buffer."""
        return self._parent

    @property
    def offsets(self) -> tuple[int, ...]:
        """First logical index along each axis."""
        return self._offsets

    @property
    def axes(self) -> tuple[range, ...]:
        """Valid logical index range along each axis."""
        return tuple(
            range(o, o + n) for o, n in zip(self._offsets, self._parent.shape)
        )

    @property
    def shape(self) -> tuple[int, ...]:
        return self._parent.shape

    @property
    def ndim(self) -> int:
        return self._parent.ndim

    @property
    def dtype(self) -> np.dtype:
        return self._parent.dtype

    @property
    def size(self) -> int:
        return self._parent.size

    def _translate(self, index) -> tuple:
        if not isinstance(index, tuple):
            index = (index,)
        if len(index) != self._parent.ndim:
            raise IndexOutOfBoundsError(
                f"Expected {self._parent.ndim} indices, got {len(index)}: {index}"
            )
        return tuple(
            shift_index(i, axis, range(o, o + n))
            for axis, (i, o, n) in enumerate(zip(index, self._offsets, self._parent.shape))
        )

    def __getitem__(self, index):
        return self._parent[self._translate(index)]

    def __setitem__(self, index, value) -> None:
        self._parent[self._translate(index)] = value

    def __iter__(self):
        return iter(self._parent.flat)

    def __len__(self) -> int:
        return self._parent.size

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._parent
        return self._parent.astype(dtype)

    def fill(self, value) -> None:
        """Set every element, halos included."""
        self._parent.fill(value)

    def copy(self) -> "OffsetArray":
        """Deep copy with the same offsets."""
        return OffsetArray(self._parent.copy(), self._offsets)

    def __repr__(self) -> str:
        bounds = ", ".join(f"{r.start}:{r.stop - 1}" for r in self.axes)
        return f"OffsetArray({bounds}, dtype={self.dtype})"
