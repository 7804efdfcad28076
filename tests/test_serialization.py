# tests/test_serialization.py
import json

import pytest

from toneterminal_presets.exceptions import ChainFormatError
from toneterminal_presets.models import PluginChainPlugin, PluginIdentifierMap, PluginParameter
from toneterminal_presets.serialization import ChainSerializer


class TestChainSerializer:
    """Test suite for ChainSerializer."""

    def test_parameter_to_dict_minimal(self):
        assert ChainSerializer.parameter_to_dict(PluginParameter(id="gain", value="1")) == {
            "id": "gain",
            "value": "1",
        }

    def test_parameter_to_dict_full(self):
        param = PluginParameter(id="gain", value="1", label="Gain", normalized=0.5, min=-12.0, max=12.0, step=0.1, unit="dB")
        serialized = ChainSerializer.parameter_to_dict(param)
        assert serialized["label"] == "Gain"
        assert serialized["unit"] == "dB"
        assert serialized["min"] == -12.0

    @pytest.mark.parametrize("data, expected_id, expected_value", [
        ({"id": "gain", "value": "3"}, "gain", "3"),
        ({"parameter": "gain", "current": 3}, "gain", "3"),
        ({"name": "mix", "default": 0.5}, "mix", "0.5"),
        ({"id": "on", "value": True}, "on", "true"),
        ({"id": "blank", "value": ""}, "blank", ""),
    ])
    def test_dict_to_parameter_aliases(self, data, expected_id, expected_value):
        param = ChainSerializer.dict_to_parameter(data)
        assert param is not None
        assert param.id == expected_id
        assert param.value == expected_value

    @pytest.mark.parametrize("data", [
        None,
        "gain",
        {"id": "", "value": "1"},
        {"id": "   ", "value": "1"},
        {"id": "gain"},
        {"id": "gain", "value": {"nested": 1}},
        {"id": 5, "value": "1"},
    ])
    def test_dict_to_parameter_rejects(self, data):
        assert ChainSerializer.dict_to_parameter(data) is None

    def test_dict_to_parameter_drops_non_finite_numbers(self):
        param = ChainSerializer.dict_to_parameter({"id": "gain", "value": "1", "min": float("nan"), "max": 10, "unit": ""})
        assert param.min is None
        assert param.max == 10.0
        assert param.unit is None

    def test_identifiers_use_camel_case_keys(self):
        identifiers = PluginIdentifierMap(fl_studio="fl", pro_tools="pt", vst3="v3")
        assert ChainSerializer.identifiers_to_dict(identifiers) == {"vst3": "v3", "flStudio": "fl", "proTools": "pt"}

    def test_dict_to_identifiers(self):
        identifiers = ChainSerializer.dict_to_identifiers(
            {"studioOne": "s1", "vst3": "", "unknown": "x", "au": 3}
        )
        assert identifiers == PluginIdentifierMap(studio_one="s1")

    def test_dict_to_identifiers_empty_is_none(self):
        assert ChainSerializer.dict_to_identifiers({"vst3": "  "}) is None
        assert ChainSerializer.dict_to_identifiers(["vst3"]) is None

    def test_dict_to_plugin_defaults(self):
        plugin = ChainSerializer.dict_to_plugin({"name": 5, "settings": ["x"]})
        assert plugin.name == "Unnamed Plugin"
        assert plugin.type == "Unknown"
        assert plugin.settings == {}
        assert plugin.bypassed is False

    def test_dict_to_plugin_coercions(self):
        plugin = ChainSerializer.dict_to_plugin({
            "name": "Comp",
            "type": "Compressor",
            "summary": "Glue the mix",
            "settings": {"Ratio": 4, "Attack": "10ms", "Auto": True, "Bad": None},
            "tags": [" bus ", "", "glue"],
            "slot": 2.7,
            "bypassed": "yes",
            "parameters": [{"id": "", "value": "x"}],
        })
        assert plugin.comment == "Glue the mix"
        assert plugin.settings == {"Ratio": "4", "Attack": "10ms"}
        assert plugin.tags == ["bus", "glue"]
        assert plugin.slot_index == 2
        assert plugin.bypassed is False
        assert plugin.parameters is None

    def test_slot_index_clamped(self):
        assert ChainSerializer.dict_to_plugin({"name": "x", "slotIndex": -3}).slot_index == 0

    def test_dict_to_chain_requires_daw(self):
        with pytest.raises(ChainFormatError):
            ChainSerializer.dict_to_chain({"plugins": []})
        with pytest.raises(ChainFormatError):
            ChainSerializer.dict_to_chain(["not", "a", "mapping"])

    def test_dict_to_chain_skips_invalid_plugins(self):
        chain = ChainSerializer.dict_to_chain({"daw": "Reaper", "plugins": [{"name": "EQ", "type": "Equalizer"}, "junk", 3]})
        assert [p.name for p in chain.plugins] == ["EQ"]

    def test_round_trip(self, chain_factory, rich_plugin):
        original = chain_factory(plugins=[
            rich_plugin,
            PluginChainPlugin(name="Limiter", type="Dynamics", settings={"Ceiling": "-1dB"}, bypassed=True, slot_index=0, tags=["master"]),
        ])
        payload = json.loads(json.dumps(ChainSerializer.chain_to_dict(original)))
        restored = ChainSerializer.dict_to_chain(payload)
        assert restored == original

    def test_load_chain_json(self, tmp_path):
        path = tmp_path / "chain.json"
        path.write_text(json.dumps({"daw": "Reaper", "plugins": [{"name": "EQ", "type": "Equalizer"}]}))
        chain = ChainSerializer.load_chain(path)
        assert chain.daw == "Reaper"
        assert chain.plugins[0].name == "EQ"

    def test_load_chain_yaml(self, tmp_path):
        path = tmp_path / "chain.yaml"
        path.write_text("daw: Ableton Live\nsummary: Bright\nplugins:\n  - name: EQ\n    type: Equalizer\n    settings:\n      Gain: +3dB\n")
        chain = ChainSerializer.load_chain(path)
        assert chain.summary == "Bright"
        assert chain.plugins[0].settings == {"Gain": "+3dB"}

    def test_load_chain_invalid_json(self, tmp_path):
        path = tmp_path / "chain.json"
        path.write_text("{not json")
        with pytest.raises(ChainFormatError, match="JSON decode error"):
            ChainSerializer.load_chain(path)

    def test_load_chain_unsupported_suffix(self, tmp_path):
        path = tmp_path / "chain.txt"
        path.write_text("{}")
        with pytest.raises(ChainFormatError):
            ChainSerializer.load_chain(path)

    def test_load_chain_missing_file(self, tmp_path):
        with pytest.raises(ChainFormatError):
            ChainSerializer.load_chain(tmp_path / "missing.json")
