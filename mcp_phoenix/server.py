#!/usr/bin/env python3
"""MCP server for the USS Phoenix emergency command interface."""

import json

from mcp.server.fastmcp import FastMCP

from phoenix_logic.config import configure_logging, load_config
from phoenix_logic.engine import get_item_info, get_room_info
from phoenix_logic.sessions import SessionRegistry
from phoenix_logic.suggest import suggest_commands

DEFAULT_SESSION = "default"

config = load_config()
mcp = FastMCP("USS Phoenix")
sessions = SessionRegistry(config)


def _run(command: str, session: str) -> str:
    return sessions.execute(session or DEFAULT_SESSION, command).message


@mcp.tool()
def look(session: str = DEFAULT_SESSION) -> str:
    """Examine the current compartment: description, items here, and exits (locked exits are marked)."""
    return _run("look", session)


@mcp.tool()
def go(direction: str, session: str = DEFAULT_SESSION) -> str:
    """Move to an adjacent compartment. Direction must be: north, south, east, or west."""
    return _run(f"go {direction}", session)


@mcp.tool()
def take(item: str, session: str = DEFAULT_SESSION) -> str:
    """Pick up an item in the current compartment. Partial names work (e.g. 'codes', 'bridge key')."""
    return _run(f"take {item}", session)


@mcp.tool()
def use(item: str, session: str = DEFAULT_SESSION) -> str:
    """Use an item from your inventory in the current compartment."""
    return _run(f"use {item}", session)


@mcp.tool()
def inventory(session: str = DEFAULT_SESSION) -> str:
    """Check what equipment you are carrying."""
    return _run("inventory", session)


@mcp.tool()
def status(session: str = DEFAULT_SESSION) -> str:
    """View the mission and ship status report."""
    return _run("status", session)


@mcp.tool()
def help(session: str = DEFAULT_SESSION) -> str:
    """Show available commands and the mission objective."""
    return _run("help", session)


@mcp.tool()
def command(text: str, session: str = DEFAULT_SESSION) -> str:
    """Send a raw command line, exactly as a player would type it."""
    return _run(text, session)


@mcp.tool()
def state(session: str = DEFAULT_SESSION) -> str:
    """Get the game state as JSON: location, inventory, level, xp, oxygen, power, completion."""
    engine = sessions.get(session or DEFAULT_SESSION)
    return json.dumps(engine.get_state(), indent=2)


@mcp.tool()
def suggest(partial: str, session: str = DEFAULT_SESSION) -> str:
    """Suggest completions for a partially typed command, one per line."""
    engine = sessions.get(session or DEFAULT_SESSION)
    return "\n".join(suggest_commands(partial, engine.state))


@mcp.tool()
def room_info(room: str, session: str = DEFAULT_SESSION) -> str:
    """Describe a compartment by key (e.g. 'ai_core'), including whether it is locked for you."""
    info = get_room_info(room, sessions.get(session or DEFAULT_SESSION).sessions)
    if info is None:
        return f"Unknown compartment: '{room}'"
    return json.dumps(info, indent=2)


@mcp.tool()
def item_info(item: str) -> str:
    """Describe an item by key (e.g. 'fusion_key')."""
    info = get_item_info(item)
    if info is None:
        return f"Unknown item: '{item}'"
    return json.dumps(info, indent=2)


@mcp.tool()
def reset(session: str = DEFAULT_SESSION) -> str:
    """Start the session over from the Command Center."""
    engine = sessions.reset(session or DEFAULT_SESSION)
    room = get_room_info(engine.state.location)
    return f"Session reset. You are in the {room['name']}. Type 'look' to begin."


def main():
    configure_logging(config.log_level)
    mcp.run()


if __name__ == "__main__":
    main()
