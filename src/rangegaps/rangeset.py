from collections.abc import Sequence
from typing import Any, Iterable, Iterator, List, Optional

from .exceptions import InvalidRangeError
from .rangegappable import RangeGappable


class RangeSet(RangeGappable, Sequence):
    """
    An ordered set of disjoint integer ranges.

    Ranges which touch or overlap are merged as they are added, so the gaps of
    a :class:`RangeSet` are exactly the values it does not contain.
    """

    def __init__(self, ranges: Iterable[range] = ()):
        self.__ranges: List[range] = []
        for r in ranges:
            if r.step != 1:
                raise InvalidRangeError(f"Range {r!r} does not have a step of 1")
            self.add(r.start, r.stop)

    def add(self, start: int, stop: Optional[int] = None) -> None:
        if stop is None:
            stop = start + 1
        if stop <= start:
            raise InvalidRangeError(f"Range [{start}, {stop}) is empty")

        for i, r in enumerate(self.__ranges):
            # the added range is entirely before current item, insert here
            if stop < r.start:
                self.__ranges.insert(i, range(start, stop))
                return

            # the added range is entirely after current item, keep looking
            if start > r.stop:
                continue

            # the added range touches the current item, merge it
            start = min(start, r.start)
            stop = max(stop, r.stop)
            while i < len(self.__ranges) - 1 and self.__ranges[i + 1].start <= stop:
                stop = max(self.__ranges[i + 1].stop, stop)
                self.__ranges.pop(i + 1)
            self.__ranges[i] = range(start, stop)
            return

        # the added range is entirely after all existing items, append it
        self.__ranges.append(range(start, stop))

    def subtract(self, start: int, stop: int) -> None:
        if stop <= start:
            raise InvalidRangeError(f"Range [{start}, {stop}) is empty")

        i = self._index(start)
        while i < len(self.__ranges):
            r = self.__ranges[i]

            # the removed range is entirely before current item, stop here
            if stop <= r.start:
                return

            # the removed range completely covers the current item, remove it
            if start <= r.start and stop >= r.stop:
                self.__ranges.pop(i)
                continue

            # the removed range cuts into the current item
            if start > r.start:
                self.__ranges[i] = range(r.start, start)
                if stop < r.stop:
                    self.__ranges.insert(i + 1, range(stop, r.stop))
            else:
                self.__ranges[i] = range(stop, r.stop)
            i += 1

    def bounds(self) -> range:
        return range(self.__ranges[0].start, self.__ranges[-1].stop)

    def irange(self, start: Any = None, stop: Any = None) -> Iterator[range]:
        i = 0 if start is None else self._index(start)
        while i < len(self.__ranges):
            r = self.__ranges[i]
            if stop is not None and r.start >= stop:
                break
            yield r
            i += 1

    def shift(self) -> range:
        return self.__ranges.pop(0)

    def _index(self, value: int) -> int:
        """
        Return the index of the first range ending after `value`.
        """
        lo, hi = 0, len(self.__ranges)
        while lo < hi:
            mid = (lo + hi) // 2
            if self.__ranges[mid].stop <= value:
                lo = mid + 1
            else:
                hi = mid
        return lo

    def __bool__(self) -> bool:
        return bool(self.__ranges)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        i = self._index(value)
        return i < len(self.__ranges) and value in self.__ranges[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeSet):
            return NotImplemented

        return self.__ranges == other.__ranges

    def __getitem__(self, key: Any) -> Any:
        return self.__ranges[key]

    def __len__(self) -> int:
        return len(self.__ranges)

    def __repr__(self) -> str:
        return "RangeSet({})".format(repr(self.__ranges))
