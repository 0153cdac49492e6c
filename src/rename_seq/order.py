"""Traversal orders over the selected files.

The sequencer assigns indices in whatever order these iterators yield
paths. Each strategy also reports a size hint so the padding width can be
chosen before the sequence is consumed.
"""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Sequence
from enum import Enum
from typing import Iterable, Iterator, NamedTuple, Optional, TypeVar

T = TypeVar("T")


class SizeHint(NamedTuple):
    """Bounds on the number of items left in a sequence."""

    lower: int
    upper: Optional[int] = None


def size_hint(files: Iterable) -> SizeHint:
    """Estimate how many items ``files`` will yield without consuming it.

    Strategies in this module report their own hint. Sized containers give
    an exact hint; anything else falls back to ``operator.length_hint`` as a
    lower bound with no upper bound.
    """

    own = getattr(files, "size_hint", None)
    if callable(own):
        return own()
    try:
        n = len(files)  # type: ignore[arg-type]
    except TypeError:
        return SizeHint(operator.length_hint(files, 0), None)
    return SizeHint(n, n)


class Sequential(Iterator[T]):
    """Yield items in the order given."""

    def __init__(self, files: Iterable[T]) -> None:
        self._hint = size_hint(files)
        self._inner = iter(files)
        self._taken = 0

    def __iter__(self) -> "Sequential[T]":
        return self

    def __next__(self) -> T:
        item = next(self._inner)
        self._taken += 1
        return item

    def size_hint(self) -> SizeHint:
        lower = max(self._hint.lower - self._taken, 0)
        if self._hint.upper is None:
            return SizeHint(max(lower, operator.length_hint(self._inner, 0)), None)
        return SizeHint(lower, max(self._hint.upper - self._taken, 0))


class ZigZag(Iterator[T]):
    """Alternate between the front and the back of a sequence.

    ``[a, b, c, d, e]`` is yielded as ``a, e, b, d, c``. Used for sets of
    single-sided scans, where the second half of a stack was scanned in
    reverse.
    """

    def __init__(self, files: Sequence[T]) -> None:
        if not isinstance(files, Sequence):
            raise TypeError(
                "alternating-ends order needs a sequence that can be read from "
                f"both ends, got {type(files).__name__}; use sequential order instead"
            )
        self._remaining = deque(files)
        self._forward = True

    def __iter__(self) -> "ZigZag[T]":
        return self

    def __next__(self) -> T:
        if not self._remaining:
            raise StopIteration
        if self._forward:
            item = self._remaining.popleft()
        else:
            item = self._remaining.pop()
        self._forward = not self._forward
        return item

    def size_hint(self) -> SizeHint:
        n = len(self._remaining)
        return SizeHint(n, n)


class Order(Enum):
    """Traversal orders selectable from the command line."""

    SEQUENTIAL = "sequential"
    SINGLE_SIDED_SCANS = "single-sided-scans"

    def traverse(self, files: Sequence[T]) -> Iterator[T]:
        """Wrap ``files`` in the iterator implementing this order."""

        if self is Order.SINGLE_SIDED_SCANS:
            return ZigZag(files)
        return Sequential(files)
