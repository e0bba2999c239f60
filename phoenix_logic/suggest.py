"""Contextual completions for a partially typed command."""

import re

from phoenix_logic.engine import HANDLERS, VERB_ALIASES
from phoenix_logic.items import room_items_available
from phoenix_logic.state import GameState
from phoenix_logic.world import ROOMS

_VERBS = list(HANDLERS) + list(VERB_ALIASES)
_SPACES = re.compile(r"\s+")


def _spoken(item_key: str) -> str:
    return item_key.replace("_", " ")


def suggest_commands(partial: str, state: GameState, limit: int = 6) -> list[str]:
    text = _SPACES.sub(" ", (partial or "").lower().lstrip())
    if not text:
        return []

    suggestions = [verb for verb in _VERBS if verb.startswith(text)]

    verb, sep, rest = text.partition(" ")
    verb = VERB_ALIASES.get(verb, verb)
    room = ROOMS.get(state.location, {})
    if sep and verb == "go":
        suggestions += [f"go {d}" for d in room.get("exits", {}) if rest in d]
    elif sep and verb == "take" and state.location in ROOMS:
        available = room_items_available(state.location, state.inventory)
        suggestions += [f"take {_spoken(i)}" for i in available if rest in _spoken(i)]
    elif sep and verb == "use":
        suggestions += [f"use {_spoken(i)}" for i in state.inventory if rest in _spoken(i)]

    return list(dict.fromkeys(suggestions))[:limit]
