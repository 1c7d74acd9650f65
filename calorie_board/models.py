"""Plain data containers shared by the helpers and UI layers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class Item:
    """A named, calorie-valued record shown in a list."""

    id: Any
    name: str
    calories: Union[int, float]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Item":
        """Build an Item from a dict with ``id``, ``name`` and ``calories`` keys."""
        return cls(id=data["id"], name=data["name"], calories=data["calories"])


@dataclass(frozen=True)
class FormState:
    """The four independent cells owned by one interactive form instance."""

    name: str = "Guest"
    age: int = 0
    is_employed: bool = False
    typed_text: str = ""
