"""Progression rules applied around every dispatched command."""

import logging

from phoenix_logic.config import DEFAULT_CONFIG, EngineConfig
from phoenix_logic.state import GameState, clamp_percent

logger = logging.getLogger(__name__)

# XP awarded by the verb handlers
XP_LOOK = 2
XP_MOVE = 5
XP_TAKE = 10
XP_SCAN = 3
XP_USE = 5
XP_TICK = 1

LEVEL_UP_NOTICE = "SYSTEM UPGRADE COMPLETE: Commander level {level}. Ship power increased."
OXYGEN_WARNING = "CRITICAL WARNING: Oxygen levels dangerously low. Find life support systems immediately."


def credits_for(value: int) -> int:
    return value // 10


def decay_oxygen(state: GameState, config: EngineConfig = DEFAULT_CONFIG) -> None:
    """Every Nth command costs oxygen. Runs right after the counter increment."""
    if state.command_count % config.oxygen_decay_interval == 0:
        state.oxygen_level = clamp_percent(state.oxygen_level - config.oxygen_decay_amount)


def apply_progression(
    state: GameState, message: str, events: list, config: EngineConfig = DEFAULT_CONFIG
) -> str:
    """Apply the XP tick, level-up and the oxygen warning to `state` in place.

    `state` must already be the command's fresh copy. Returns the final message;
    level-up and oxygen events are appended to `events`.
    """
    state.xp += XP_TICK

    # A single check per command, so one command never grants two levels
    if state.xp >= state.level * config.xp_per_level:
        state.level += 1
        state.power_level = clamp_percent(state.power_level + config.level_up_power_bonus)
        message += "\n\n" + LEVEL_UP_NOTICE.format(level=state.level)
        events.append({"type": "level_up", "level": state.level, "power": state.power_level})
        logger.info("Level up: level %d, power %d%%", state.level, state.power_level)

    if 0 < state.oxygen_level <= config.critical_oxygen_threshold:
        message += "\n\n" + OXYGEN_WARNING
        events.append({"type": "oxygen_critical", "oxygen": state.oxygen_level})

    return message
