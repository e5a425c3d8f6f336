"""Tests for effect registry."""

from effects import registry

BUILT_IN = {
    "fx.channel_swap",
    "fx.flip_swap",
    "fx.brightness",
    "fx.wave",
    "fx.kaleidoscope",
    "fx.merge",
    "fx.strong",
    "fx.checker_twist",
}


def test_all_built_ins_registered():
    ids = {e["id"] for e in registry.list_all()}
    assert BUILT_IN <= ids


def test_get_returns_callable():
    info = registry.get("fx.wave")
    assert info is not None
    assert callable(info["fn"])
    assert info["name"] == "Wave"
    assert info["category"] == "distortion"


def test_get_unknown_returns_none():
    assert registry.get("fx.nonexistent") is None


def test_list_all_metadata_shape():
    for entry in registry.list_all():
        assert set(entry) == {"id", "name", "category", "params"}
        assert isinstance(entry["params"], dict)
