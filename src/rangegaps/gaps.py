import enum
import logging
from typing import Any, Callable, Iterable, Iterator, Optional

import attr

from .bounds import Bounds, bounds, point_bounds, upper_lt, upper_max
from .exceptions import InvalidRangeError

logger = logging.getLogger(__name__)

BoundsFunc = Callable[[Any], Bounds]


@attr.s(frozen=True, slots=True)
class Gap:
    """
    A hole in coverage, the half-open interval `[lower, upper)`.

    A gap unpacks like a `(lower, upper)` pair.
    """

    lower = attr.ib()  # type: Any
    "The first value which is not covered."
    upper = attr.ib()  # type: Any
    "The first value past the hole, which is covered again."

    def __contains__(self, value: Any) -> bool:
        return self.lower <= value < self.upper

    def __iter__(self) -> Iterator[Any]:
        yield self.lower
        yield self.upper


@bounds.register
def _bounds_gap(value: Gap) -> Bounds:
    return value.lower, value.upper


class GapState(enum.Enum):
    FRESH = 0
    ADVANCING = 1
    EXHAUSTED = 2


class GapIterator:
    """
    An iterator over the gaps between the items produced by `source`.

    Items must arrive ordered by lower bound. Overlapping or touching items
    leave no gap between them. The source is only consumed as gaps are
    requested, and it must not be modified while the iterator is alive.

    :param source: An iterable of range-like items.
    :param start: If given, a gap from `start` to the first item is reported.
    :param stop: If given, gaps are reported up to `stop` (exclusive) and
        iteration ends there, reporting a final gap if `stop` is not covered.
    :param key: A function returning the `(lower, upper)` bounds of an item,
        defaults to :func:`rangegaps.bounds.bounds`.
    """

    def __init__(
        self,
        source: Iterable[Any],
        start: Any = None,
        stop: Any = None,
        key: Optional[BoundsFunc] = None,
    ) -> None:
        if start is not None and stop is not None and stop < start:
            raise InvalidRangeError(f"Window start {start!r} is past stop {stop!r}")

        self._iter: Optional[Iterator[Any]] = iter(source)
        self._key = key if key is not None else bounds
        self._start = start
        self._stop = stop

        # the trailing edge, covered up to but excluding this value
        self._edge = start
        self._last_lower: Any = None
        self._state = GapState.FRESH

    @property
    def edge(self) -> Any:
        """
        The value up to which the consumed items cover, or `None` when
        nothing was consumed yet or coverage is unbounded.
        """
        return self._edge

    @property
    def state(self) -> GapState:
        return self._state

    def __iter__(self) -> "GapIterator":
        return self

    def __next__(self) -> Gap:
        while self._state != GapState.EXHAUSTED:
            gap = self._advance()
            if gap is not None:
                return gap
        raise StopIteration

    def __repr__(self) -> str:
        return (
            f"GapIterator(state={self._state.name}, edge={self._edge!r}, "
            f"start={self._start!r}, stop={self._stop!r})"
        )

    def _advance(self) -> Optional[Gap]:
        assert self._iter is not None
        try:
            item = next(self._iter)
        except StopIteration:
            return self._finish(self._stop)

        lower, upper = self._key(item)
        if lower is not None and upper is not None and upper < lower:
            logger.debug("Item %r ends before it starts, clamping", item)
            upper = lower
        if lower is not None:
            if self._last_lower is not None and lower < self._last_lower:
                logger.debug("Item %r is out of order", item)
            self._last_lower = lower
        self._state = GapState.ADVANCING

        # an item at or past the end of the window closes it
        if self._stop is not None and lower is not None and lower >= self._stop:
            return self._finish(self._stop)

        # an empty item covers nothing, and must not split a gap
        if lower is not None and lower == upper:
            return None

        gap = None
        if self._edge is not None and lower is not None and self._edge < lower:
            gap = Gap(self._edge, lower)

        self._edge = upper if self._edge is None else upper_max(self._edge, upper)

        # once covered up to the end of the window or beyond, no gap is left
        if not upper_lt(self._edge, self._stop):
            self._finish(None)

        return gap

    def _finish(self, stop: Any) -> Optional[Gap]:
        self._state = GapState.EXHAUSTED
        self._iter = None

        if stop is not None and self._edge is not None and self._edge < stop:
            return Gap(self._edge, stop)
        return None


def gaps(
    source: Iterable[Any],
    start: Any = None,
    stop: Any = None,
    key: Optional[BoundsFunc] = None,
) -> GapIterator:
    """
    Return an iterator over the gaps between the range-like items of `source`.

    >>> list(gaps([range(0, 5), range(3, 8), range(10, 12)]))
    [Gap(lower=8, upper=10)]
    """
    return GapIterator(source, start=start, stop=stop, key=key)


def point_gaps(
    points: Iterable[Any], start: Any = None, stop: Any = None
) -> GapIterator:
    """
    Return an iterator over the gaps between the ordered values of `points`.

    >>> list(point_gaps([1, 3, 4], start=0, stop=7))
    [Gap(lower=0, upper=1), Gap(lower=2, upper=3), Gap(lower=5, upper=7)]
    """
    return GapIterator(points, start=start, stop=stop, key=point_bounds)
