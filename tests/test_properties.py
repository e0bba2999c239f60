"""
Invariants that must hold over any command sequence.
"""

import random

from phoenix_logic.config import EngineConfig
from phoenix_logic.engine import GameEngine
from phoenix_logic.locks import is_locked
from phoenix_logic.world import ITEMS, ROOMS

DIRECTIONS = ["north", "south", "east", "west", "up"]
VERBS = ["look", "inventory", "status", "help", "guide", "xyzzy", "", "use scanner", "go"]


def _random_command(rng):
    roll = rng.random()
    if roll < 0.5:
        return f"go {rng.choice(DIRECTIONS)}"
    if roll < 0.8:
        return f"take {rng.choice(list(ITEMS)).replace('_', ' ')}"
    if roll < 0.9:
        return f"use {rng.choice(list(ITEMS)).replace('_', ' ')}"
    return rng.choice(VERBS)


class TestRandomWalk:
    """A seeded random walk over the whole command surface."""

    def test_invariants_hold(self):
        rng = random.Random(20240917)
        engine = GameEngine(EngineConfig(freeze_on_completion=False))

        for n in range(1, 501):
            before = engine.state
            unlocked_before = set(engine.sessions.unlocked_rooms)
            command = _random_command(rng)

            engine.execute(command)
            state = engine.state

            assert state.command_count == n
            assert state.location in ROOMS
            assert 0 <= state.oxygen_level <= 100
            assert 0 <= state.power_level <= 100
            assert len(state.inventory) == len(set(state.inventory))
            assert unlocked_before <= engine.sessions.unlocked_rooms
            assert state.visited_rooms == len(engine.sessions.visited_rooms)
            if before.game_completed:
                assert state.game_completed

            if state.location != before.location:
                # Moved along an exit whose target was open or openable
                assert state.location in ROOMS[before.location]["exits"].values()
                if is_locked(state.location, unlocked_before):
                    required = ROOMS[state.location]["unlock_requires"]
                    assert all(i in before.inventory for i in required)

            if not command.startswith("take"):
                assert state.inventory == before.inventory
                assert state.credits == before.credits
