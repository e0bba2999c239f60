"""Lock gate: which rooms can be entered right now, and what opens them."""

from phoenix_logic.world import ROOMS


def is_locked(room_key: str, unlocked_rooms) -> bool:
    room = ROOMS[room_key]
    return bool(room.get("locked")) and room_key not in unlocked_rooms


def missing_requirements(room_key: str, inventory) -> list[str]:
    """Unlock items for the room that are not in the inventory, in table order."""
    room = ROOMS[room_key]
    if not room.get("locked"):
        return []
    carried = set(inventory)
    return [i for i in room.get("unlock_requires", []) if i not in carried]


def can_unlock(room_key: str, inventory) -> bool:
    return not missing_requirements(room_key, inventory)
