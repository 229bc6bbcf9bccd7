"""Strings bundled with their segmentation for repeated comparisons."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .compare import Ordering, compare_segments
from .segments import Segment, segment

__all__ = ["HumanString"]


@dataclass(frozen=True, eq=False)
class HumanString:
    """Immutable string that compares in natural order.

    The segment sequence is computed once at construction, so sorting many
    ``HumanString`` values does not re-segment them on every comparison.
    Equality is natural equality: ``HumanString("a007") == HumanString("a7")``
    even though the texts differ, and both hash alike.
    """

    text: str
    segments: tuple[Segment, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", segment(self.text))

    @classmethod
    def from_str(cls, text: str) -> HumanString:
        """Build a ``HumanString`` for *text*."""
        return cls(text)

    def compare(self, other: HumanString) -> Ordering:
        """Return the natural ordering of ``self`` relative to *other*."""
        return compare_segments(self.segments, other.segments)

    def _ordering(self, other: Any) -> Ordering | None:
        if not isinstance(other, HumanString):
            return None
        return compare_segments(self.segments, other.segments)

    def __eq__(self, other: object) -> bool:
        result = self._ordering(other)
        if result is None:
            return NotImplemented
        return result is Ordering.EQUAL

    def __lt__(self, other: Any) -> bool:
        result = self._ordering(other)
        if result is None:
            return NotImplemented
        return result is Ordering.LESS

    def __le__(self, other: Any) -> bool:
        result = self._ordering(other)
        if result is None:
            return NotImplemented
        return result is not Ordering.GREATER

    def __gt__(self, other: Any) -> bool:
        result = self._ordering(other)
        if result is None:
            return NotImplemented
        return result is Ordering.GREATER

    def __ge__(self, other: Any) -> bool:
        result = self._ordering(other)
        if result is None:
            return NotImplemented
        return result is not Ordering.LESS

    def __hash__(self) -> int:
        # Numbers hash by magnitude to stay consistent with ``__eq__``.
        return hash(
            tuple(
                (item.kind, item.magnitude if item.is_number else item.text)
                for item in self.segments
            )
        )

    def __str__(self) -> str:
        return self.text
