"""Selecting which items of a playlist or input file to download."""

from __future__ import annotations

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str) -> int:
    text = text.strip()
    return int(text) if _INTEGER.fullmatch(text) else 0


def item_range(low: int, high: int) -> list[int]:
    """Return the integers from low to high inclusive."""
    return list(range(low, high + 1))


def need_download_list(items: str, item_start: int, item_end: int, length: int) -> list[int]:
    """Return the 1-based indices of the items that need downloading.

    ``items`` is a comma separated list of numbers and ranges such as
    ``"1,5,6,8-10"``; when empty, ``item_start``..``item_end`` is used,
    where an end of 0 means the last item.
    """
    if items:
        selected: list[int] = []
        for selection in items.split(","):
            bounds = selection.split("-")
            start = _atoi(bounds[0])
            end = _atoi(bounds[1]) if len(bounds) >= 2 else start
            selected.extend(item_range(start, end))
        return selected

    item_start = max(item_start, 1)
    if item_end == 0:
        item_end = length
    item_end = max(item_end, item_start)
    return item_range(item_start, item_end)