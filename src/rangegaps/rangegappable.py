from abc import ABCMeta, abstractmethod
from bisect import bisect_left
from typing import Any, Iterator, Optional, Sequence

from .bounds import Bounds, bounds, point_bounds
from .gaps import BoundsFunc, GapIterator


class RangeGappable(metaclass=ABCMeta):
    """
    An ordered collection which can report the gaps within a window of its
    contents.

    Implementations provide :meth:`irange`, and :meth:`item_bounds` if their
    items are not understood by :func:`rangegaps.bounds.bounds`.
    """

    @abstractmethod
    def irange(self, start: Any = None, stop: Any = None) -> Iterator[Any]:
        """
        Return the items intersecting `[start, stop)`, ordered by lower bound.

        A `None` start or stop leaves that side of the window open.
        """
        pass  # pragma: no cover

    def item_bounds(self, item: Any) -> Bounds:
        return bounds(item)

    def gaps(self, start: Any = None, stop: Any = None) -> GapIterator:
        """
        Return an iterator over the gaps within `[start, stop)`.

        If `start` is given, a gap before the first item is reported. If `stop`
        is given, a gap after the last item is reported.
        """
        return GapIterator(
            self.irange(start, stop), start=start, stop=stop, key=self.item_bounds
        )


def range_gaps(
    collection: Any,
    start: Any = None,
    stop: Any = None,
    key: Optional[BoundsFunc] = None,
) -> GapIterator:
    """
    Return an iterator over the gaps within `[start, stop)` of any collection
    providing an `irange(start, stop)` method.
    """
    if key is None and isinstance(collection, RangeGappable):
        return collection.gaps(start, stop)
    return GapIterator(collection.irange(start, stop), start=start, stop=stop, key=key)


class SortedKeys(RangeGappable):
    """
    A view over a sorted sequence of keys, each key being a single point.

    >>> list(SortedKeys(sorted({1: "a", 99: "b"})).gaps(0, 100))
    [Gap(lower=0, upper=1), Gap(lower=2, upper=99)]
    """

    def __init__(self, keys: Sequence[Any]) -> None:
        self._keys = keys

    def irange(self, start: Any = None, stop: Any = None) -> Iterator[Any]:
        keys = self._keys
        lo = 0 if start is None else bisect_left(keys, start)
        hi = len(keys) if stop is None else bisect_left(keys, stop)
        for i in range(lo, hi):
            yield keys[i]

    def item_bounds(self, item: Any) -> Bounds:
        return point_bounds(item)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"SortedKeys({self._keys!r})"
