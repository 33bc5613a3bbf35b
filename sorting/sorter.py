"""Natural sorting and frequency aggregation of a loaded collection."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from sorting.items import Collection, Item

NATURAL = "natural"
BY_COUNT = "byCount"
SORTING_TYPES = (NATURAL, BY_COUNT)


@dataclass(frozen=True)
class SortedView:
    """Result of sorting a collection.

    `frequencies` is only set in ``byCount`` mode, as (item, count) pairs in
    ascending count order.
    """

    mode: str
    items: List[Item]
    frequencies: Optional[List[Tuple[Item, int]]] = None


def natural_sort(items: Iterable[Item]) -> List[Item]:
    """Stable ascending sort: numeric for longs, by code point for text."""
    return sorted(items)


def frequency_table(sorted_items: Iterable[Item]) -> Dict[Item, int]:
    """Count occurrences, keyed in order of first appearance."""
    return dict(Counter(sorted_items))


def sort_by_count(table: Dict[Item, int]) -> List[Tuple[Item, int]]:
    """Order (item, count) pairs by count; ties keep the table's order."""
    return sorted(table.items(), key=lambda kv: kv[1])


def sort_collection(collection: Collection, mode: str = NATURAL) -> SortedView:
    """Sort `collection` naturally, then aggregate by count in ``byCount`` mode.

    Raises:
        ValueError: If `mode` is not a known sorting type
    """
    if mode not in SORTING_TYPES:
        raise ValueError(f"Unknown sorting type: {mode}")

    items = natural_sort(collection.items)
    if mode == NATURAL:
        return SortedView(mode=mode, items=items)
    return SortedView(
        mode=mode,
        items=items,
        frequencies=sort_by_count(frequency_table(items)),
    )
