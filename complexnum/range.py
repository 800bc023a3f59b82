import logging
import math
from typing import Optional, Union

import numpy as np

from complexnum.errors import InvalidRangeError, MalformedInputError, RangeTooLargeError

logger = logging.getLogger(__name__)

# Longest integer sequence to_serial_int_array() will build.
MAX_SERIAL_LENGTH = 2 ** 31 - 1


def _format_endpoint(value: float) -> str:
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    return str(int(value)) if value.is_integer() else repr(value)


class Range:
    """
    An interval of the extended real line with independently open or closed ends.

    ``str(Range(0, 1, True, False))`` is ``"Range [0, 1)"``.
    """

    INF = math.inf

    __slots__ = ("_start", "_end", "_start_closed", "_end_closed")

    def __init__(self, start: float, end: float, start_closed: bool = True,
                 end_closed: Optional[bool] = None):
        """
        Create a range.

        Args:
            start: Lower endpoint
            end: Upper endpoint
            start_closed: Whether start belongs to the range
            end_closed: Whether end belongs to the range, defaults to start_closed

        Raises:
            InvalidRangeError: If start > end, or start == end with an open end
        """
        if end_closed is None:
            end_closed = start_closed

        start, end = float(start), float(end)
        if not start <= end or (start == end and not (start_closed and end_closed)):
            logger.debug("Rejected range start=%r end=%r", start, end)
            raise InvalidRangeError("Arguments not specified correctly")

        object.__setattr__(self, "_start", start)
        object.__setattr__(self, "_end", end)
        object.__setattr__(self, "_start_closed", bool(start_closed))
        object.__setattr__(self, "_end_closed", bool(end_closed))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._start, self._end, self._start_closed, self._end_closed))

    @classmethod
    def value_of(cls, text: str) -> "Range":
        """
        Parse the form produced by ``str()``, e.g. "Range [0, ∞)" or "(1.5, 2]".

        Raises:
            MalformedInputError: If the text is not a range
            InvalidRangeError: If the endpoints are out of order
        """
        body = text.replace("∞", "Infinity").strip()
        if body.startswith("Range"):
            body = body[len("Range"):].strip()

        parts = body.split(",")
        if len(parts) != 2:
            raise MalformedInputError(text)

        start_str, end_str = parts[0].strip(), parts[1].strip()
        if start_str[:1] not in ("[", "(") or end_str[-1:] not in ("]", ")"):
            raise MalformedInputError(text)

        try:
            start = float(start_str[1:])
            end = float(end_str[:-1])

        except ValueError as e:
            raise MalformedInputError(text) from e

        return cls(start, end, start_str[0] == "[", end_str[-1] == "]")

    @property
    def start(self) -> float:
        return self._start

    @property
    def end(self) -> float:
        return self._end

    @property
    def start_closed(self) -> bool:
        return self._start_closed

    @property
    def end_closed(self) -> bool:
        return self._end_closed

    def contains(self, value: Union[float, "Range"]) -> bool:
        """
        Check whether a number lies in this range, or a range is a subset of it.

        Args:
            value: A real number or another Range

        Returns:
            True if value is contained
        """
        if isinstance(value, Range):
            return self._covers_start(value._start, value._start_closed) and \
                self._covers_end(value._end, value._end_closed)

        below = self._start <= value if self._start_closed else self._start < value
        above = value <= self._end if self._end_closed else value < self._end
        return below and above

    def _covers_start(self, start: float, closed: bool) -> bool:
        return self._start < start or (self._start == start and (self._start_closed or not closed))

    def _covers_end(self, end: float, closed: bool) -> bool:
        return end < self._end or (end == self._end and (self._end_closed or not closed))

    def intersection(self, other: "Range") -> Optional["Range"]:
        """
        Overlap of two ranges.

        Returns:
            The common range, or None if the ranges do not overlap
        """
        if self._start == other._start:
            start, start_closed = self._start, self._start_closed and other._start_closed

        else:
            start, start_closed = max((self._start, self._start_closed), (other._start, other._start_closed))

        if self._end == other._end:
            end, end_closed = self._end, self._end_closed and other._end_closed

        else:
            end, end_closed = min((self._end, self._end_closed), (other._end, other._end_closed))

        if start > end or (start == end and not (start_closed and end_closed)):
            return None

        return Range(start, end, start_closed, end_closed)

    def to_serial_int_array(self, ascending: bool = True) -> np.ndarray:
        """
        All integers in the range, as an int64 array.

        Args:
            ascending: Order of the result, descending if False

        Raises:
            RangeTooLargeError: If the range is unbounded or holds too many integers
        """
        if math.isinf(self._start) or math.isinf(self._end):
            raise RangeTooLargeError()

        first = math.ceil(self._start)
        if first == self._start and not self._start_closed:
            first += 1

        last = math.floor(self._end)
        if last == self._end and not self._end_closed:
            last -= 1

        if last - first + 1 > MAX_SERIAL_LENGTH:
            raise RangeTooLargeError()

        values = np.arange(first, last + 1, dtype=np.int64)
        return values if ascending else values[::-1]

    __contains__ = contains
    __and__ = intersection

    def __eq__(self, other) -> bool:
        if not isinstance(other, Range):
            return NotImplemented

        return (self._start, self._end, self._start_closed, self._end_closed) == \
            (other._start, other._end, other._start_closed, other._end_closed)

    def __hash__(self) -> int:
        return hash((self._start, self._end, self._start_closed, self._end_closed))

    def __str__(self) -> str:
        start_symbol = "[" if self._start_closed else "("
        end_symbol = "]" if self._end_closed else ")"
        return f"Range {start_symbol}{_format_endpoint(self._start)}, {_format_endpoint(self._end)}{end_symbol}"

    def __repr__(self) -> str:
        return f"Range({self._start!r}, {self._end!r}, {self._start_closed}, {self._end_closed})"
