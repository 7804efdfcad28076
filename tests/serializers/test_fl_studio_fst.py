# tests/serializers/test_fl_studio_fst.py
from toneterminal_presets.models import PluginChainPlugin, PluginParameter, SongInfo
from toneterminal_presets.serializers.fl_studio_fst import FlStudioFstSerializer


def render(chain) -> str:
    return FlStudioFstSerializer().serialize(chain).data.decode("utf-8")


class TestFlStudioFstSerializer:

    def test_metadata(self, chain):
        preset = FlStudioFstSerializer().serialize(chain)
        assert preset.serializer_id == "fl-studio-fst"
        assert preset.label == "FL Studio Mixer State"
        assert preset.mime == "application/octet-stream"
        assert preset.is_native is True
        assert preset.filename == "unit_test.fst"

    def test_can_handle(self):
        serializer = FlStudioFstSerializer()
        assert serializer.can_handle("fl_studio")
        assert serializer.can_handle("flstudio")
        assert not serializer.can_handle("FL Studio")

    def test_full_document(self, chain):
        assert render(chain) == (
            "[ToneTerminalFST]\n"
            "Version=1\n"
            "CreatedBy=ToneTerminal\n"
            "DAW=FL Studio\n"
            "Song=Unit Test\n"
            "ClipWindow=00:00 - 00:15\n"
            "Summary=Test chain\n"
            "SlotCount=1\n"
            "\n"
            "[Slot0]\n"
            "Name=Tone EQ\n"
            "DisplayName=Tone EQ\n"
            "Type=Equalizer\n"
            "State=Active\n"
            "Comment=Boost presence\n"
            "Param0=Gain=+3dB\n"
            "Param1=Frequency=5kHz\n"
        )

    def test_optional_header_lines_omitted(self, chain_factory):
        content = render(chain_factory(song=None, summary=None, clip_window=None, plugins=[]))
        assert content == (
            "[ToneTerminalFST]\nVersion=1\nCreatedBy=ToneTerminal\nDAW=FL Studio\nSlotCount=0\n"
        )

    def test_comment_escaping(self, chain_factory):
        plugin = PluginChainPlugin(name="EQ", type="Equalizer", comment="cut mud\nthen a=b\r\nboost")
        lines = render(chain_factory(plugins=[plugin])).splitlines()
        assert "Comment=cut mud then a-b boost" in lines

    def test_parameters_preferred(self, chain_factory, rich_plugin):
        content = render(chain_factory(plugins=[rich_plugin]))
        assert "Name=Fruity Pro-Q 3" in content
        assert "Param0=Band 1 Gain=-2.5" in content
        assert "Param1=band1_freq=220" in content
        assert "Ignored" not in content

    def test_parameter_values_escaped(self, chain_factory):
        plugin = PluginChainPlugin(
            name="EQ", type="Equalizer", parameters=[PluginParameter(id="a=b", value="x\ny=z")]
        )
        assert "Param0=a-b=x y-z" in render(chain_factory(plugins=[plugin])).splitlines()

    def test_placeholder_parameter(self, minimal_chain_factory):
        content = render(minimal_chain_factory("FL Studio", "fl_studio"))
        assert "Name=Bare Comp" in content
        assert content.count("Param") == 1
        assert "Param0=Default=0" in content

    def test_slot_order_and_state(self, chain_factory):
        plugins = [
            PluginChainPlugin(name="Late", type="Reverb", slot_index=5, bypassed=True),
            PluginChainPlugin(name="Early", type="EQ", slot_index=1),
        ]
        content = render(chain_factory(plugins=plugins))
        assert "SlotCount=2" in content
        assert content.index("DisplayName=Early") < content.index("DisplayName=Late")
        slot1 = content.split("[Slot1]")[1]
        assert "DisplayName=Late" in slot1
        assert "State=Bypassed" in slot1

    def test_filename_fallbacks(self, chain_factory):
        serializer = FlStudioFstSerializer()
        assert serializer.serialize(chain_factory(song=SongInfo(artist="x"))).filename == "test_chain.fst"
        assert serializer.serialize(chain_factory(song=None, summary=None)).filename == "fl_studio_chain.fst"

    def test_does_not_mutate_chain(self, chain):
        before = repr(chain)
        FlStudioFstSerializer().serialize(chain)
        assert repr(chain) == before
