# ruff: noqa: F401
import logging

from .bounds import Bounds, bounds, inclusive, point_bounds, successor
from .exceptions import InvalidRangeError
from .gaps import Gap, GapIterator, GapState, gaps, point_gaps
from .rangegappable import RangeGappable, SortedKeys, range_gaps
from .rangeset import RangeSet

__version__ = "0.3.0"

# Set default logging handler to avoid "No handler found" warnings.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Bounds",
    "Gap",
    "GapIterator",
    "GapState",
    "InvalidRangeError",
    "RangeGappable",
    "RangeSet",
    "SortedKeys",
    "bounds",
    "gaps",
    "inclusive",
    "point_bounds",
    "point_gaps",
    "range_gaps",
    "successor",
]
