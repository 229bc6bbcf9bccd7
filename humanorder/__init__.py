"""Natural ("human") ordering of strings.

Runs of ASCII digits compare by numeric magnitude, everything else by code
point, so ``"file2"`` sorts before ``"file11"``::

    >>> from humanorder import natural_sorted
    >>> natural_sorted(["file1.txt", "file11.txt", "file2.txt"])
    ['file1.txt', 'file2.txt', 'file11.txt']
"""

from .core.compare import Ordering, compare, compare_segments
from .core.human_string import HumanString
from .core.segments import Segment, SegmentKind, join_segments, segment
from .core.sorting import natural_sort, natural_sort_key, natural_sorted

__all__ = [
    "HumanString",
    "Ordering",
    "Segment",
    "SegmentKind",
    "compare",
    "compare_segments",
    "join_segments",
    "natural_sort",
    "natural_sort_key",
    "natural_sorted",
    "segment",
]
