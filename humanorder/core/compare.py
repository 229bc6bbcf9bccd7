"""Three-way natural comparison of strings."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum
from typing import Any

from .segments import Segment, segment

__all__ = ["Ordering", "compare", "compare_segments", "segments_of"]


class Ordering(IntEnum):
    """Result of a three-way comparison.

    The integer values follow the old ``cmp`` convention so an ``Ordering``
    can be returned from a function wrapped with :func:`functools.cmp_to_key`.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_sign(cls, value: int) -> Ordering:
        """Return the ordering matching the sign of *value*."""
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> Ordering:
        """Return the ordering seen from the other operand."""
        return Ordering(-self.value)


def _cmp(left: Any, right: Any) -> Ordering:
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL


def _compare_numbers(left: Segment, right: Segment) -> Ordering:
    # Digit strings of equal length order the same lexicographically and
    # numerically, so no integer conversion is needed for long runs.
    left_digits = left.magnitude
    right_digits = right.magnitude
    by_length = _cmp(len(left_digits), len(right_digits))
    if by_length is not Ordering.EQUAL:
        return by_length
    return _cmp(left_digits, right_digits)


def _compare_pair(left: Segment, right: Segment) -> Ordering:
    if left.kind is not right.kind:
        # A digit and a non-digit never match, so this always decides.
        return _cmp(left.text[0], right.text[0])
    if left.is_number:
        return _compare_numbers(left, right)
    return _cmp(left.text, right.text)


def compare_segments(
    left: Sequence[Segment], right: Sequence[Segment]
) -> Ordering:
    """Compare two segment sequences in natural order.

    Segments are compared pairwise from the start and the first unequal pair
    decides. Number segments compare by magnitude, so ``007`` and ``7`` tie;
    text segments compare by code point. When one sequence is a prefix of the
    other, the shorter one sorts first.
    """
    for left_item, right_item in zip(left, right):
        result = _compare_pair(left_item, right_item)
        if result is not Ordering.EQUAL:
            return result
    return _cmp(len(left), len(right))


def segments_of(value: Any) -> tuple[Segment, ...]:
    """Return the segment sequence for a string or a pre-segmented value.

    Values exposing a ``segments`` tuple (such as
    :class:`~humanorder.core.human_string.HumanString`) are used as is;
    ``None`` counts as the empty string and anything else goes through
    :func:`str`.
    """
    if isinstance(value, str):
        return segment(value)
    segments = getattr(value, "segments", None)
    if isinstance(segments, tuple):
        return segments
    return segment("" if value is None else str(value))


def compare(left: Any, right: Any) -> Ordering:
    """Compare *left* and *right* in natural order.

    >>> compare("file2", "file11")
    <Ordering.LESS: -1>
    >>> compare("file007.txt", "file7.txt")
    <Ordering.EQUAL: 0>
    """
    return compare_segments(segments_of(left), segments_of(right))
