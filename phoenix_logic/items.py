"""Resolve loosely typed item references against canonical item keys."""

import re

from phoenix_logic.world import ITEMS, ROOMS

_WHITESPACE = re.compile(r"\s+")


def normalize_fragment(fragment: str) -> str:
    """'Bridge  Key' -> 'bridge_key'."""
    return _WHITESPACE.sub("_", fragment.strip().lower())


def resolve_item(fragment: str, candidates) -> str | None:
    """Return the first candidate key matching the typed fragment, or None.

    A key matches when the normalized fragment is a substring of it, or when
    the item's display name contains the raw lower-cased fragment.
    """
    raw = fragment.strip().lower()
    if not raw:
        return None
    normalized = normalize_fragment(raw)

    for item_key in candidates:
        if normalized in item_key:
            return item_key
        item = ITEMS.get(item_key)
        if item and raw in item["name"].lower():
            return item_key
    return None


def room_items_available(room_key: str, inventory) -> list[str]:
    """Items listed for a room minus everything the player carries."""
    carried = set(inventory)
    return [i for i in ROOMS[room_key].get("items", []) if i not in carried]


def item_name(item_key: str) -> str:
    item = ITEMS.get(item_key)
    return item["name"] if item else item_key.replace("_", " ")
