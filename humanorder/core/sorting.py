"""Natural sorting of string collections."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, MutableSequence
from typing import Any, TypeVar

from .compare import segments_of
from .segments import Segment

__all__ = ["natural_sort", "natural_sort_key", "natural_sorted"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Text before the digit block, numbers, text after the digit block.
_TEXT_BELOW_DIGITS = 0
_NUMBER = 1
_TEXT_ABOVE_DIGITS = 2


def _segment_key(item: Segment) -> tuple[object, ...]:
    if item.is_number:
        digits = item.magnitude
        return (_NUMBER, len(digits), digits)
    rank = _TEXT_BELOW_DIGITS if item.text[0] < "0" else _TEXT_ABOVE_DIGITS
    return (rank, item.text)


def natural_sort_key(value: Any) -> tuple[tuple[object, ...], ...]:
    """Return a sort key ordering like :func:`~humanorder.core.compare.compare`.

    The key is a plain tuple, so it works with :func:`sorted`, :func:`min`,
    :func:`max`, :mod:`bisect` and :mod:`heapq`. Keys of naturally equal
    strings are equal.
    """
    return tuple(_segment_key(item) for item in segments_of(value))


def _key_func(key: Callable[[T], Any] | None) -> Callable[[T], Any]:
    if key is None:
        return natural_sort_key
    return lambda item: natural_sort_key(key(item))


def natural_sorted(
    items: Iterable[T],
    *,
    key: Callable[[T], Any] | None = None,
    reverse: bool = False,
) -> list[T]:
    """Return a new list with *items* in natural order.

    *key* extracts the string to sort by from each item. The sort is stable,
    so naturally equal items keep their relative order, also when *reverse*
    is set.
    """
    result = sorted(items, key=_key_func(key), reverse=reverse)
    logger.debug("Naturally sorted %d items (reverse=%s)", len(result), reverse)
    return result


def natural_sort(
    items: MutableSequence[T],
    *,
    key: Callable[[T], Any] | None = None,
    reverse: bool = False,
) -> None:
    """Sort *items* in place in natural order.

    Lists are sorted with :meth:`list.sort`; other mutable sequences are
    rewritten item by item. Stability is the same as for
    :func:`natural_sorted`.
    """
    if isinstance(items, list):
        items.sort(key=_key_func(key), reverse=reverse)
    else:
        ordered = sorted(items, key=_key_func(key), reverse=reverse)
        for index, item in enumerate(ordered):
            items[index] = item
    logger.debug("Naturally sorted %d items in place (reverse=%s)", len(items), reverse)
