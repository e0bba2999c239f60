"""
Tests for the item resolver.
"""

from phoenix_logic.items import item_name, normalize_fragment, resolve_item, room_items_available


class TestNormalizeFragment:
    def test_lowercases_and_joins_with_underscores(self):
        assert normalize_fragment("Bridge  Key") == "bridge_key"

    def test_strips_outer_whitespace(self):
        assert normalize_fragment("  codes ") == "codes"


class TestResolveItem:
    """resolve_item matches keys by substring and names by raw text."""

    def test_key_substring(self):
        assert resolve_item("key", ["bridge_key", "captain_logs"]) == "bridge_key"

    def test_spaces_match_underscored_key(self):
        assert resolve_item("matrix components", ["research_pass", "ai_matrix_components"]) == "ai_matrix_components"

    def test_display_name_match(self):
        """'access key' is not in the key bridge_key, but is in its name."""
        assert resolve_item("access key", ["bridge_key"]) == "bridge_key"

    def test_name_match_uses_raw_fragment(self):
        assert resolve_item("captain's", ["bridge_key", "captain_logs"]) == "captain_logs"

    def test_first_candidate_wins(self):
        assert resolve_item("codes", ["security_codes", "emergency_codes"]) == "security_codes"
        assert resolve_item("codes", ["emergency_codes", "security_codes"]) == "emergency_codes"

    def test_case_insensitive(self):
        assert resolve_item("FUSION", ["fusion_key"]) == "fusion_key"

    def test_not_found(self):
        assert resolve_item("widget", ["bridge_key", "captain_logs"]) is None

    def test_empty_fragment(self):
        assert resolve_item("   ", ["bridge_key"]) is None

    def test_empty_candidates(self):
        assert resolve_item("key", []) is None


class TestRoomItems:
    def test_carried_items_are_filtered_out(self):
        assert room_items_available("bridge", ["bridge_key"]) == ["captain_logs"]

    def test_static_table_untouched(self):
        room_items_available("bridge", ["bridge_key", "captain_logs"])
        assert room_items_available("bridge", []) == ["bridge_key", "captain_logs"]

    def test_item_name(self):
        assert item_name("fusion_key") == "Fusion Access Key"
        assert item_name("mystery_box") == "mystery box"
