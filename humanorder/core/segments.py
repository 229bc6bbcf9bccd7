"""Split strings into alternating text and number segments."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

__all__ = ["Segment", "SegmentKind", "join_segments", "segment"]

# ``\d`` would also match non-ASCII digits; only 0-9 start a number run.
_NUMBER_RUN = re.compile(r"([0-9]+)")


class SegmentKind(str, Enum):
    """Class of characters a segment is made of."""

    TEXT = "text"
    NUMBER = "number"


@dataclass(frozen=True)
class Segment:
    """Maximal run of either digit or non-digit characters."""

    kind: SegmentKind
    text: str

    @property
    def is_number(self) -> bool:
        """Return ``True`` when the segment is a run of ASCII digits."""
        return self.kind is SegmentKind.NUMBER

    @property
    def magnitude(self) -> str:
        """Return the digit run without leading zeros.

        Only meaningful for number segments. An all-zero run yields an empty
        string so every spelling of zero shares the same magnitude.
        """
        return self.text.lstrip("0")


def segment(text: str) -> tuple[Segment, ...]:
    """Return the segments of *text* in order.

    The result partitions *text* exactly: joining the segments gives the input
    back, no segment is empty and neighbouring segments always differ in kind.
    An empty string has no segments.
    """
    parts = _NUMBER_RUN.split(text)
    segments: list[Segment] = []
    # ``re.split`` with a capturing group alternates text/number starting
    # with text; empty text parts only occur at either end.
    for index, part in enumerate(parts):
        if not part:
            continue
        kind = SegmentKind.NUMBER if index % 2 == 1 else SegmentKind.TEXT
        segments.append(Segment(kind, part))
    return tuple(segments)


def join_segments(segments: Iterable[Segment]) -> str:
    """Concatenate *segments* back into the string they were taken from."""
    return "".join(item.text for item in segments)
