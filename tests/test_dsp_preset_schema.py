"""
Tests for DSPNode / DSPPreset.
"""

from dspchain.presets import DSPNode, DSPPreset


class TestDSPNode:
    """Positional access and defaults."""

    def test_default_values(self):
        node = DSPNode(type="eq")
        assert node.enabled is None
        assert node.items == []
        assert node.name is None

    def test_items_not_shared(self):
        """Each node gets its own item list."""
        a = DSPNode(type="eq")
        b = DSPNode(type="eq")
        a.items.append("1")
        assert b.items == []

    def test_item_in_range(self):
        node = DSPNode(type="eq", items=["0.5", "1.0"])
        assert node.item(0) == "0.5"
        assert node.item(1) == "1.0"

    def test_item_out_of_range_uses_default(self):
        """Older presets with fewer values fall back to the default."""
        node = DSPNode(type="eq", items=["0.5"])
        assert node.item(1) is None
        assert node.item(1, "0.0") == "0.0"
        assert node.item(-1, "x") == "x"

    def test_resolve_items_pads(self):
        """Missing trailing positions take unit defaults."""
        node = DSPNode(type="eq", items=["0.7"])
        assert node.resolve_items(["0.5", "1.0", "0"]) == ["0.7", "1.0", "0"]

    def test_resolve_items_truncates(self):
        """Values beyond what the unit knows are ignored."""
        node = DSPNode(type="eq", items=["1", "2", "3", "4"])
        assert node.resolve_items(["a", "b"]) == ["1", "2"]

    def test_resolve_items_keeps_empty_values(self):
        """An empty stored value is still a stored value."""
        node = DSPNode(type="eq", items=["", "2"])
        assert node.resolve_items(["a", "b", "c"]) == ["", "2", "c"]

    def test_to_dict_minimal(self):
        """Unset flag and name are omitted."""
        d = DSPNode(type="comp", items=["4"]).to_dict()
        assert d == {"type": "comp", "items": ["4"]}

    def test_to_dict_full(self):
        d = DSPNode(type="eq", enabled=True, items=["1"], name="Equalizer").to_dict()
        assert d["enabled"] is True
        assert d["name"] == "Equalizer"

    def test_from_dict(self):
        node = DSPNode.from_dict({"type": "eq", "enabled": True, "items": [0.5, "1"]})
        assert node.type == "eq"
        assert node.enabled is True
        assert node.items == ["0.5", "1"]

    def test_from_dict_false_flag_is_unset(self):
        """enabled=False maps to the unset state."""
        node = DSPNode.from_dict({"type": "eq", "enabled": False})
        assert node.enabled is None
        assert node.items == []


class TestDSPPreset:
    """Preset container."""

    def test_types_in_order(self):
        preset = DSPPreset(name="p", nodes=[DSPNode(type="eq"), DSPNode(type="comp")])
        assert preset.types() == ["eq", "comp"]
        assert len(preset) == 2

    def test_dict_round_trip(self):
        """Preset survives dict round-trip."""
        original = DSPPreset(name="rock", nodes=[
            DSPNode(type="eq", enabled=True, items=["0.5", ""]),
            DSPNode(type="comp", name="Compressor"),
        ])
        d = original.to_dict()
        assert d["name"] == "rock"
        assert len(d["items"]) == 2
        assert DSPPreset.from_dict(d) == original
