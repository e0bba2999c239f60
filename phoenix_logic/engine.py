"""Core game engine: pure command interpreter, no I/O."""

import logging
from dataclasses import dataclass, field

from phoenix_logic.config import DEFAULT_CONFIG, EngineConfig
from phoenix_logic.items import item_name, resolve_item, room_items_available
from phoenix_logic.locks import is_locked, missing_requirements
from phoenix_logic.rules import (
    XP_LOOK,
    XP_MOVE,
    XP_SCAN,
    XP_TAKE,
    XP_USE,
    apply_progression,
    credits_for,
    decay_oxygen,
)
from phoenix_logic.state import GameState, SessionSets, new_game_state, new_session_sets
from phoenix_logic.world import (
    FINAL_ROOM,
    ITEMS,
    ROOMS,
    SCANNER_ITEM,
    START_ROOM,
    WIN_COMPONENT,
    WIN_ITEM,
    validate_world,
)

logger = logging.getLogger(__name__)

validate_world(ROOMS, ITEMS, START_ROOM)

VERB_ALIASES = {
    "l": "look",
    "i": "inventory",
    "inv": "inventory",
    "move": "go",
    "get": "take",
    "stats": "status",
    "commands": "help",
}

HELP_TEXT = (
    "Commands:\n"
    "  go <direction>  - Move through the ship (north, south, east, west)\n"
    "  look, l         - Examine the current compartment\n"
    "  take <item>     - Collect equipment and components\n"
    "  use <item>      - Activate devices and tools\n"
    "  inventory, i    - Check carried equipment\n"
    "  status          - View mission and ship status\n"
    "  guide           - Open the operations manual\n"
    "  help            - Show this message\n\n"
    "Objective: reach the AI Core and restore ship systems."
)

VICTORY_TEXT = (
    "MISSION COMPLETE!\n\n"
    "You insert the AI Activation Key and upload the matrix components. "
    "The AI Core hums to life.\n\n"
    "'Systems coming online... Thank you, Commander. Ship operations restored.'\n\n"
    "Life support: RESTORED\n"
    "Power systems: ONLINE\n"
    "Navigation: FUNCTIONAL\n"
    "Communications: ACTIVE\n\n"
    "You've saved the USS Phoenix and her crew!"
)

FROZEN_TEXT = (
    "Mission complete. The USS Phoenix is back under AI control. "
    "Start a new session to play again."
)


@dataclass
class CommandResult:
    message: str
    game_state: GameState
    events: list[dict] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "gameState": self.game_state.to_dict(),
            "events": [dict(e) for e in self.events],
        }


class _Turn:
    """One command in flight: `state` is a private copy, `sessions` is the caller's live sets."""

    def __init__(self, state: GameState, sessions: SessionSets, config: EngineConfig):
        self.state = state
        self.sessions = sessions
        self.config = config
        self.events: list[dict] = []

    @property
    def room(self) -> dict:
        return ROOMS[self.state.location]


def parse_command(raw: str) -> tuple[str, list[str]]:
    """Lower-case and split a command. Returns (canonical verb, argument tokens)."""
    tokens = (raw or "").strip().lower().split()
    if not tokens:
        return "", []
    verb = VERB_ALIASES.get(tokens[0], tokens[0])
    return verb, tokens[1:]


def execute_command(
    raw: str,
    state: GameState,
    sessions: SessionSets,
    config: EngineConfig | None = None,
) -> CommandResult:
    """Run one command against a session.

    `state` is not modified; the returned result carries a fresh GameState.
    `sessions` may gain visited or unlocked rooms. Never raises for any input.
    """
    config = config or DEFAULT_CONFIG

    if state.game_completed and config.freeze_on_completion:
        logger.warning("Command %r ignored: session already completed", raw)
        return CommandResult(FROZEN_TEXT, state.copy())

    turn = _Turn(state.copy(command_count=state.command_count + 1), sessions, config)
    decay_oxygen(turn.state, config)
    verb, args = parse_command(raw)
    logger.debug("Command %d: verb=%r args=%r", turn.state.command_count, verb, args)

    if not verb:
        message = "Say something. Type 'help' for commands."
    else:
        handler = HANDLERS.get(verb)
        if handler is None:
            message = (
                f"Unknown command: '{verb}'. Type 'help' for available commands, "
                "or 'guide' for the full manual."
            )
        else:
            message = handler(turn, args)

    message = apply_progression(turn.state, message, turn.events, config)
    return CommandResult(message, turn.state, turn.events)


# -- command handlers --


def _look(turn: _Turn, _args: list[str]) -> str:
    room = turn.room
    lines = [room["name"], "", room["description"], ""]

    available = room_items_available(turn.state.location, turn.state.inventory)
    if available:
        lines.append("Items here: " + ", ".join(item_name(i) for i in available))

    exits = []
    for direction, target in room["exits"].items():
        marker = " (locked)" if is_locked(target, turn.sessions.unlocked_rooms) else ""
        exits.append(direction + marker)
    lines.append("Exits: " + ", ".join(exits))

    turn.state.xp += XP_LOOK
    return "\n".join(lines)


def _go(turn: _Turn, args: list[str]) -> str:
    if not args:
        return "Go where? Specify a direction (north, south, east, west)."

    direction = args[0]
    target = turn.room["exits"].get(direction)
    if target is None:
        turn.events.append({"type": "move", "direction": direction, "room": None, "success": False})
        return f"You can't go {direction} from here."

    target_room = ROOMS[target]
    prefix = ""

    if is_locked(target, turn.sessions.unlocked_rooms):
        missing = missing_requirements(target, turn.state.inventory)
        if missing:
            turn.events.append({"type": "move", "direction": direction, "room": target, "success": False})
            needed = " and ".join(item_name(i) for i in missing)
            return f"The door to {target_room['name']} is locked. Required: {needed}."

        required = target_room.get("unlock_requires", [])
        turn.sessions.unlocked_rooms.add(target)
        turn.events.append({"type": "unlock", "room": target, "items": list(required)})
        logger.info("Unlocked %s", target)
        used = " and ".join(item_name(i) for i in required)
        prefix = f"Using the {used}, you unlock the door and enter...\n\n" if used else ""

    turn.state.location = target
    turn.sessions.visited_rooms.add(target)
    turn.state.visited_rooms = len(turn.sessions.visited_rooms)
    turn.state.xp += XP_MOVE
    turn.events.append({"type": "move", "direction": direction, "room": target, "success": True})

    return prefix + f"You move {direction} to the {target_room['name']}.\n\n{target_room['description']}"


def _take(turn: _Turn, args: list[str]) -> str:
    if not args:
        return "Take what? (Example: take codes, take key)"

    fragment = " ".join(args)
    state = turn.state
    available = room_items_available(state.location, state.inventory)

    item_key = resolve_item(fragment, available)
    if item_key is None:
        carried_here = [i for i in turn.room.get("items", []) if state.has(i)]
        held = resolve_item(fragment, carried_here)
        if held is not None:
            return f"You already have the {item_name(held)}."
        return f"There's no '{fragment}' here to take."

    item = ITEMS[item_key]
    reward = credits_for(item["value"])
    state.inventory.append(item_key)
    state.credits += reward
    state.xp += XP_TAKE
    turn.events.append({"type": "take", "item": item_key, "credits": reward})

    return (
        f"You take the {item['name']}. +{XP_TAKE} XP, +{reward} credits!\n\n"
        f"{item['description']}"
    )


def _use(turn: _Turn, args: list[str]) -> str:
    if not args:
        return "Use what? (Example: use scanner, use activation key)"

    fragment = " ".join(args)
    state = turn.state
    item_key = resolve_item(fragment, state.inventory)
    if item_key is None:
        return f"You don't have '{fragment}' in your inventory."

    if item_key == WIN_ITEM and state.location == FINAL_ROOM:
        return _activate_core(turn)

    if item_key == SCANNER_ITEM:
        state.xp += XP_SCAN
        turn.events.append({"type": "use", "item": item_key, "success": True})
        return (
            "SCANNER ANALYSIS:\n\n"
            f"Location: {turn.room['name']}\n"
            "System status: Operational\n"
            f"Oxygen level: {state.oxygen_level}%\n"
            f"Power level: {state.power_level}%"
        )

    state.xp += XP_USE
    turn.events.append({"type": "use", "item": item_key, "success": True})
    return f"You use the {item_name(item_key)}. The device activates with a soft hum. +{XP_USE} XP"


def _activate_core(turn: _Turn) -> str:
    state = turn.state
    if state.game_completed:
        turn.events.append({"type": "use", "item": WIN_ITEM, "success": False})
        return "The AI Core is already online."
    if not state.has(WIN_COMPONENT):
        turn.events.append({"type": "use", "item": WIN_ITEM, "success": False})
        return (
            f"The activation key needs the {item_name(WIN_COMPONENT)} to function. "
            "Find them in the Laboratory first!"
        )

    bonus = turn.config.win_xp_bonus
    state.game_completed = True
    state.xp += bonus
    turn.events.append({"type": "use", "item": WIN_ITEM, "success": True})
    turn.events.append({"type": "game_completed", "xp_bonus": bonus})
    logger.info("Mission complete after %d commands", state.command_count)
    return VICTORY_TEXT


def _inventory(turn: _Turn, _args: list[str]) -> str:
    if not turn.state.inventory:
        return "Commander's equipment:\n\nYour equipment bay is empty."
    lines = ["Commander's equipment:", ""]
    for item_key in turn.state.inventory:
        item = ITEMS.get(item_key)
        if item:
            lines.append(f"- {item['name']}: {item['description']}")
    return "\n".join(lines)


def _status(turn: _Turn, _args: list[str]) -> str:
    state = turn.state
    mission = "COMPLETED" if state.game_completed else "IN PROGRESS"
    return (
        "EMERGENCY STATUS REPORT:\n\n"
        f"Commander: {turn.config.commander_name}\n"
        f"Location: {turn.room['name']}\n"
        f"Mission level: {state.level}\n"
        f"Experience: {state.xp} XP\n"
        f"Credits: {state.credits}\n"
        f"Commands issued: {state.command_count}\n\n"
        "SHIP STATUS:\n"
        f"Oxygen level: {state.oxygen_level}%\n"
        f"Power level: {state.power_level}%\n"
        f"Compartments accessed: {state.visited_rooms}/{len(ROOMS)}\n"
        f"Equipment items: {len(state.inventory)}\n"
        f"Mission status: {mission}"
    )


def _help(_turn: _Turn, _args: list[str]) -> str:
    return HELP_TEXT


def _guide(turn: _Turn, _args: list[str]) -> str:
    turn.events.append({"type": "show_guide"})
    return "Opening the Emergency Operations Manual..."


HANDLERS = {
    "look": _look,
    "go": _go,
    "take": _take,
    "use": _use,
    "inventory": _inventory,
    "status": _status,
    "help": _help,
    "guide": _guide,
}


# -- read surface for map and tooltip consumers --


def get_room_info(room_key: str, sessions: SessionSets | None = None) -> dict | None:
    """Snapshot of one room, or None if the key is unknown."""
    room = ROOMS.get(room_key)
    if room is None:
        return None
    info = {
        "key": room_key,
        "name": room["name"],
        "description": room["description"],
        "exits": dict(room["exits"]),
        "items": list(room.get("items", [])),
        "locked": bool(room.get("locked")),
        "unlock_requires": list(room.get("unlock_requires", [])),
        "final_objective": bool(room.get("final_objective")),
    }
    if sessions is not None:
        info["locked"] = is_locked(room_key, sessions.unlocked_rooms)
        info["visited"] = room_key in sessions.visited_rooms
    return info


def get_item_info(item_key: str) -> dict | None:
    item = ITEMS.get(item_key)
    if item is None:
        return None
    return {"key": item_key, **item}


class GameEngine:
    """One play session: owns its GameState and tracking sets."""

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or DEFAULT_CONFIG
        self.state: GameState = new_game_state()
        self.sessions: SessionSets = new_session_sets()
        self.last_result: CommandResult | None = None

    def reset(self):
        self.state = new_game_state()
        self.sessions = new_session_sets()
        self.last_result = None

    def execute(self, command: str) -> str:
        """Parse and execute a command. Returns narrative text."""
        result = execute_command(command, self.state, self.sessions, self.config)
        self.state = result.game_state
        self.last_result = result
        return result.message

    def is_won(self) -> bool:
        return self.state.game_completed

    def get_state(self) -> dict:
        state = self.state.to_dict()
        state["visitedRoomsList"] = sorted(self.sessions.visited_rooms)
        state["unlockedRooms"] = sorted(self.sessions.unlocked_rooms)
        return state
