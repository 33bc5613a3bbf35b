"""Text report for a sorted collection."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from sorting.items import Item, ItemKind
from sorting.sorter import BY_COUNT, SortedView


def percent(count: int, total: int) -> int:
    """Floor of ``100 * count / total``; 0 for an empty collection."""
    if total == 0:
        return 0
    return 100 * count // total


def render_total(label: str, total: int) -> str:
    return f"Total {label}: {total}\n"


def render_natural(items: Iterable[Item], one_per_line: bool = False) -> str:
    if one_per_line:
        return "Sorted data: \n" + "".join(f"{item}\n" for item in items)
    return "Sorted data: " + "".join(f"{item} " for item in items) + "\n"


def render_by_count(frequencies: Iterable[Tuple[Item, int]], total: int) -> str:
    lines: List[str] = []
    for item, count in frequencies:
        lines.append(f"{item}: {count} time(s). {percent(count, total)}%\n")
    return "".join(lines)


def render(kind: ItemKind, total: int, view: SortedView) -> str:
    """Build the full report: the total line followed by the sorted section.

    Args:
        kind: Item kind of the run, selects the label and natural layout
        total: Number of successfully parsed items
        view: Output of `sorting.sorter.sort_collection`

    Returns:
        Report text, every line newline-terminated
    """
    report = render_total(kind.label, total)
    if view.mode == BY_COUNT:
        return report + render_by_count(view.frequencies or [], total)
    return report + render_natural(view.items, one_per_line=kind.one_per_line)
