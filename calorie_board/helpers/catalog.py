"""Category → items catalogs shown by the list section of the app."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from calorie_board.models import Item

logger = logging.getLogger(__name__)

Catalog = Dict[str, List[Item]]


class CatalogError(ValueError):
    """Raised when a catalog file cannot be read or has the wrong shape."""


DEFAULT_CATALOG: Catalog = {
    "Fruits": [
        Item(id=1, name="apple", calories=95),
        Item(id=2, name="orange", calories=45),
        Item(id=3, name="banana", calories=105),
        Item(id=4, name="coconut", calories=159),
        Item(id=5, name="pineapple", calories=37),
    ],
    "Vegetables": [
        Item(id=6, name="potatoes", calories=110),
        Item(id=7, name="celery", calories=15),
        Item(id=8, name="carrots", calories=25),
        Item(id=9, name="corn", calories=63),
        Item(id=10, name="broccoli", calories=50),
    ],
}


def parse_catalog(data: Any) -> Catalog:
    """Validate decoded JSON and turn it into a Catalog (order preserved)."""
    if not isinstance(data, dict):
        raise CatalogError("Catalog must be a JSON object mapping category to items")

    catalog: Catalog = {}
    for category, raw_items in data.items():
        if not isinstance(raw_items, list):
            raise CatalogError(f"Category {category!r} must map to a list of items")
        items: List[Item] = []
        for idx, raw in enumerate(raw_items):
            if not isinstance(raw, dict):
                raise CatalogError(f"{category}[{idx}] is not an object")
            missing = [k for k in ("id", "name", "calories") if k not in raw]
            if missing:
                raise CatalogError(f"{category}[{idx}] is missing {', '.join(missing)}")
            if not isinstance(raw["name"], str):
                raise CatalogError(f"{category}[{idx}].name must be a string")
            calories = raw["calories"]
            if isinstance(calories, bool) or not isinstance(calories, (int, float)):
                raise CatalogError(f"{category}[{idx}].calories must be a number")
            items.append(Item.from_mapping(raw))
        catalog[str(category)] = items
    return catalog


def load_catalog(path: Optional[Path] = None) -> Catalog:
    """Load a catalog from *path*, or return the built-in one when *path* is None."""
    if path is None:
        return DEFAULT_CATALOG

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogError(f"Cannot read catalog file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in catalog file {path}: {e}") from e

    catalog = parse_catalog(data)
    logger.info("Loaded %d categories from %s", len(catalog), path)
    return catalog
