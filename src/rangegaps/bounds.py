import datetime
from functools import singledispatch
from typing import Any, Optional, Tuple

# A `(lower, upper)` pair, `upper` exclusive. `None` marks an unbounded side.
Bounds = Tuple[Optional[Any], Optional[Any]]


@singledispatch
def successor(value: Any) -> Any:
    """
    Return the smallest value strictly greater than `value`.

    This is what maps points and inclusive upper bounds onto the exclusive
    convention. Discrete types other than integers and dates can be supported
    with `successor.register`.
    """
    raise TypeError(f"{type(value).__name__} values have no successor")


@successor.register
def _successor_int(value: int) -> int:
    return value + 1


@successor.register
def _successor_date(value: datetime.date) -> datetime.date:
    return value + datetime.timedelta(days=1)


@successor.register
def _successor_datetime(value: datetime.datetime) -> datetime.datetime:
    # datetime subclasses date, but is not discrete
    raise TypeError("datetime values have no successor")


@singledispatch
def bounds(value: Any) -> Bounds:
    """
    Return the `(lower, upper)` pair of a range-like value.

    - a `range` maps to the span of the values it yields;
    - a `(lower, upper)` tuple or list maps to itself;
    - objects with `start` / `stop` attributes (e.g. `slice`) map to
      `(start, stop)`;
    - any other value is a point `p` and maps to `(p, successor(p))`.

    Other range-like types can be supported with `bounds.register`.
    """
    if hasattr(value, "start") and hasattr(value, "stop"):
        return value.start, value.stop
    return point_bounds(value)


@bounds.register
def _bounds_range(value: range) -> Bounds:
    # an empty range covers nothing, wherever it starts
    if not value:
        return value.start, value.start

    first = value[0]
    last = value[-1]
    return min(first, last), max(first, last) + 1


@bounds.register(list)
@bounds.register(tuple)
def _bounds_pair(value: Any) -> Bounds:
    lower, upper = value
    return lower, upper


def inclusive(lower: Any, upper: Any) -> Bounds:
    """
    Convert an inclusive `[lower, upper]` pair to the exclusive convention.
    """
    if upper is None:
        return lower, None
    return lower, successor(upper)


def upper_lt(a: Any, b: Any) -> bool:
    """
    Return a < b, where `None` is an unbounded upper bound.
    """
    if a is None:
        return False
    return b is None or a < b


def upper_max(a: Any, b: Any) -> Any:
    """
    Return max(a, b), where `None` is an unbounded upper bound.
    """
    if a is None or b is None:
        return None
    return max(a, b)


def point_bounds(value: Any) -> Bounds:
    """
    Return the bounds of `value` taken as a single point, whatever its type.
    """
    return value, successor(value)
