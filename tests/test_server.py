"""
Tests for the MCP tool functions, called directly.
"""

import json

import pytest

from mcp_phoenix import server


@pytest.fixture
def session(request):
    """A session id unique to the test."""
    name = request.node.name
    yield name
    if name in server.sessions:
        server.sessions.drop(name)


class TestTools:
    def test_look(self, session):
        assert "Command Center" in server.look(session=session)

    def test_movement_and_state(self, session):
        server.go("north", session=session)
        server.take("bridge key", session=session)

        state = json.loads(server.state(session=session))

        assert state["location"] == "bridge"
        assert "bridge_key" in state["inventory"]
        assert state["commandCount"] == 2

    def test_raw_command(self, session):
        assert "Commander's equipment" in server.command("inv", session=session)

    def test_suggest(self, session):
        assert server.suggest("go ", session=session).splitlines() == ["go north", "go south"]

    def test_room_info(self, session):
        info = json.loads(server.room_info("navigation", session=session))

        assert info["locked"] is True
        assert server.room_info("escape_pod", session=session).startswith("Unknown compartment")

    def test_item_info(self):
        assert json.loads(server.item_info("power_cell"))["value"] == 500
        assert server.item_info("warp_coil").startswith("Unknown item")

    def test_reset(self, session):
        server.go("north", session=session)

        message = server.reset(session=session)

        assert "Command Center" in message
        assert json.loads(server.state(session=session))["commandCount"] == 0
