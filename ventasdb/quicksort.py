"""In-place quicksort with a middle-element pivot."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Any


def quick_sort(
    items: MutableSequence[Any],
    less: Callable[[Any, Any], bool] | None = None,
) -> None:
    """Sort ``items`` in place so that ``less`` decides which value comes first."""
    if less is None:
        less = operator.lt
    ranges = [(0, len(items) - 1)]
    while ranges:
        left, right = ranges.pop()
        if left >= right:
            continue
        i, j = left, right
        pivot = items[(left + right) // 2]
        while i <= j:
            while less(items[i], pivot):
                i += 1
            while less(pivot, items[j]):
                j -= 1
            if i <= j:
                items[i], items[j] = items[j], items[i]
                i += 1
                j -= 1
        if left < j:
            ranges.append((left, j))
        if i < right:
            ranges.append((i, right))