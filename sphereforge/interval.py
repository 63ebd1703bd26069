"""
Numeric interval used to bound valid ray parameters.
"""

from __future__ import annotations


class Interval:
    """A closed range [low, high] with inclusive or exclusive membership tests.

    Bounds given in reverse order are swapped, so `low <= high` always holds.
    """

    __slots__ = ('_low', '_high')

    def __init__(self, low: float, high: float):
        if high < low:
            low, high = high, low
        self._low = low
        self._high = high

    @property
    def low(self) -> float:
        return self._low

    @property
    def high(self) -> float:
        return self._high

    def contains(self, value: float, inclusive: bool = True) -> bool:
        """Check whether `value` lies within the interval.

        Args:
            value: The value to test
            inclusive: Whether the bounds themselves count as inside

        Returns:
            True if the value is inside the interval
        """
        if inclusive:
            return self._low <= value <= self._high
        return self._low < value < self._high

    def with_high(self, high: float) -> Interval:
        """Return a new interval sharing this lower bound."""
        return Interval(self._low, high)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._low == other._low and self._high == other._high

    def __hash__(self) -> int:
        return hash((self._low, self._high))

    def __repr__(self) -> str:
        return f"Interval({self._low}, {self._high})"
