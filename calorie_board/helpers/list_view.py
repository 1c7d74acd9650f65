"""Pure rendering logic for the calorie list view."""
from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from calorie_board.models import Item

ItemLike = Union[Item, Mapping[str, Any]]

# Separator shown between an item's name and its calories
SEPARATOR = " : &nbsp; "


@dataclass(frozen=True)
class ListEntry:
    key: Any
    name: str
    calories: Union[int, float]


@dataclass(frozen=True)
class ListViewModel:
    """Heading plus ordered entries, ready to be turned into markup."""

    heading: str
    entries: Tuple[ListEntry, ...]


def coerce_item(item: ItemLike) -> Item:
    """Accept either an Item or a mapping with id/name/calories keys."""
    if isinstance(item, Item):
        return item
    return Item.from_mapping(item)


def build_list_view(category: str, items: Optional[Iterable[ItemLike]]) -> ListViewModel:
    """Map *items* to ordered entries keyed by the item id.

    ``None`` is treated like an empty sequence. Duplicate ids are passed
    through untouched; keeping them unique is the caller's job.
    """
    entries = tuple(
        ListEntry(key=it.id, name=it.name, calories=it.calories)
        for it in (coerce_item(raw) for raw in (items or ()))
    )
    return ListViewModel(heading=category, entries=entries)


def render_entry_html(entry: ListEntry) -> str:
    return (
        f'<li key="{html.escape(str(entry.key))}">'
        f"{html.escape(entry.name)}{SEPARATOR}<b>{entry.calories}</b></li>"
    )


def render_list_html(category: str, items: Optional[Iterable[ItemLike]]) -> str:
    """Return the HTML fragment for a category heading and its ordered list."""
    view = build_list_view(category, items)
    lines: List[str] = [
        f'<h3 class="list-category">{html.escape(view.heading)}</h3>',
        '<ol class="list-items">',
    ]
    lines.extend(render_entry_html(entry) for entry in view.entries)
    lines.append("</ol>")
    return "\n".join(lines)
