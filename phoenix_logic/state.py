"""Session state: the per-player game record and the visited/unlocked sets."""

from dataclasses import dataclass, field, replace

from phoenix_logic.world import PRE_UNLOCKED_ROOMS, START_ROOM, STARTER_INVENTORY


def clamp_percent(value: int) -> int:
    return max(0, min(100, value))


@dataclass
class GameState:
    location: str
    inventory: list[str] = field(default_factory=list)
    level: int = 1
    xp: int = 0
    credits: int = 100
    command_count: int = 0
    visited_rooms: int = 1
    oxygen_level: int = 100
    power_level: int = 25
    game_completed: bool = False

    def __post_init__(self):
        self.inventory = list(dict.fromkeys(self.inventory))
        self.oxygen_level = clamp_percent(self.oxygen_level)
        self.power_level = clamp_percent(self.power_level)

    def copy(self, **changes) -> "GameState":
        """Independent copy; the inventory list is never shared."""
        changes.setdefault("inventory", list(self.inventory))
        return replace(self, **changes)

    def has(self, item_key: str) -> bool:
        return item_key in self.inventory

    def to_dict(self) -> dict:
        return {
            "location": self.location,
            "inventory": list(self.inventory),
            "level": self.level,
            "xp": self.xp,
            "credits": self.credits,
            "commandCount": self.command_count,
            "visitedRooms": self.visited_rooms,
            "oxygenLevel": self.oxygen_level,
            "powerLevel": self.power_level,
            "gameCompleted": self.game_completed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GameState":
        return cls(
            location=data["location"],
            inventory=list(data.get("inventory", [])),
            level=data.get("level", 1),
            xp=data.get("xp", 0),
            credits=data.get("credits", 100),
            command_count=data.get("commandCount", 0),
            visited_rooms=data.get("visitedRooms", 1),
            oxygen_level=data.get("oxygenLevel", 100),
            power_level=data.get("powerLevel", 25),
            game_completed=data.get("gameCompleted", False),
        )


@dataclass
class SessionSets:
    """Append-only tracking sets owned by one session."""

    visited_rooms: set[str] = field(default_factory=set)
    unlocked_rooms: set[str] = field(default_factory=set)


def new_game_state() -> GameState:
    return GameState(location=START_ROOM, inventory=list(STARTER_INVENTORY))


def new_session_sets() -> SessionSets:
    return SessionSets(
        visited_rooms={START_ROOM},
        unlocked_rooms={START_ROOM, *PRE_UNLOCKED_ROOMS},
    )
