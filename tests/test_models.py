# tests/test_models.py
from toneterminal_presets.models import (
    IDENTIFIER_KEYS,
    PluginChain,
    PluginChainPlugin,
    PluginIdentifierMap,
    PluginParameter,
    SerializedPreset,
)


class TestPluginParameter:
    """Test suite for PluginParameter model."""

    def test_init_basic(self):
        param = PluginParameter(id="gain", value="0.75")
        assert param.id == "gain"
        assert param.value == "0.75"
        assert param.label is None

    def test_value_defaults_to_empty_string(self):
        assert PluginParameter(id="gain").value == ""

    def test_display_name(self):
        assert PluginParameter(id="gain", label="Gain").display_name == "Gain"
        assert PluginParameter(id="gain").display_name == "gain"

    def test_equality(self):
        assert PluginParameter(id="gain", value="1") == PluginParameter(id="gain", value="1")
        assert PluginParameter(id="gain", value="1") != PluginParameter(id="gain", value="2")


class TestPluginIdentifierMap:

    def test_slots_match_declared_keys(self):
        identifiers = PluginIdentifierMap()
        for key in IDENTIFIER_KEYS:
            assert identifiers.get(key) is None

    def test_get_ignores_unknown_keys(self):
        assert PluginIdentifierMap(vst3="x").get("name") is None

    def test_empty_strings_count_as_missing(self):
        identifiers = PluginIdentifierMap(vst3="")
        assert identifiers.get("vst3") is None
        assert identifiers.is_empty()

    def test_items_in_declaration_order(self):
        identifiers = PluginIdentifierMap(reaper="r", generic="g", vst3="v")
        assert identifiers.items() == [("generic", "g"), ("vst3", "v"), ("reaper", "r")]


class TestPluginChain:

    def test_defaults(self):
        plugin = PluginChainPlugin(name="EQ", type="Equalizer")
        assert plugin.settings == {}
        assert plugin.bypassed is False
        assert plugin.slot_index is None
        assert plugin.parameters is None

    def test_default_containers_not_shared(self):
        a = PluginChain(daw="Reaper")
        b = PluginChain(daw="Reaper")
        a.plugins.append(PluginChainPlugin(name="EQ", type="Equalizer"))
        assert b.plugins == []

    def test_serialized_preset(self):
        preset = SerializedPreset(
            filename="x.fst", mime="application/octet-stream", data=b"x",
            serializer_id="fl-studio-fst", label="FL Studio Mixer State", is_native=True,
        )
        assert preset.is_native
        assert preset.data == b"x"
