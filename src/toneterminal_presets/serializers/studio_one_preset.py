"""
Writes Studio One native presets (.preset).

A preset is a zip archive with two XML members: `PresetInfo.xml` carries the
header and device list, `UserData/ToneTerminal.xml` keeps the summary, song
and clip window as side-channel metadata Studio One ignores.
"""

from typing import List

from ..archive import ArchiveEntry, build_zip_archive
from ..base_serializer import BaseSerializer
from ..constants import CREATOR, MIME_ZIP
from ..models import PluginChain, PluginChainPlugin
from ..utils import encode_utf8, pretty_xml, sort_chain_plugins, xml_escape

PRESET_INFO_PATH = "PresetInfo.xml"
USER_DATA_PATH = f"UserData/{CREATOR}.xml"
DEFAULT_TITLE = f"{CREATOR} Chain"


class StudioOnePresetSerializer(BaseSerializer):
    """Serializer for Studio One preset archives."""

    id = "studio-one-preset"
    label = "Studio One Native Preset"
    daw_ids = ("studio_one", "studioone")
    format_label = "Studio One Preset (.preset)"
    file_extension = ".preset"
    mime = MIME_ZIP
    identifier_keys = ("studio_one", "vst3", "generic")

    def _format_device(self, plugin: PluginChainPlugin, index: int) -> List[str]:
        bypassed = "true" if plugin.bypassed else "false"
        notes = xml_escape(plugin.comment) if plugin.comment else ""
        lines = [
            f'    <Device index="{index}">',
            f"      <Name>{xml_escape(plugin.name)}</Name>",
            f"      <Identifier>{xml_escape(self.identifier_for(plugin))}</Identifier>",
            f"      <Type>{xml_escape(plugin.type)}</Type>",
            f"      <Bypassed>{bypassed}</Bypassed>",
            "      <Parameters>",
        ]
        for param_index, (name, value) in enumerate(self.parameters_for(plugin)):
            lines.append(
                f'        <Parameter index="{param_index}" name="{xml_escape(name)}" value="{xml_escape(value)}"/>'
            )
        lines.extend([
            "      </Parameters>",
            f"      <Notes>{notes}</Notes>",
            "    </Device>",
        ])
        return lines

    def build_preset_info(self, chain: PluginChain) -> str:
        """Render `PresetInfo.xml`."""
        title = (chain.song.title if chain.song is not None else None) or chain.summary or DEFAULT_TITLE
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            "<Preset>",
            "  <Header>",
            f"    <Title>{xml_escape(title)}</Title>",
            f"    <Creator>{CREATOR}</Creator>",
            f"    <Category>{xml_escape(chain.daw)}</Category>",
        ]
        if chain.clip_window:
            lines.append(f"    <Comment>{xml_escape(chain.clip_window)}</Comment>")
        lines.extend(["  </Header>", "  <Devices>"])
        for index, plugin in enumerate(sort_chain_plugins(chain)):
            lines.extend(self._format_device(plugin, index))
        lines.extend(["  </Devices>", "</Preset>"])
        return pretty_xml("\n".join(lines))

    def build_user_data(self, chain: PluginChain) -> str:
        """Render the side-channel metadata document."""
        song = chain.song
        fields = [
            ("Summary", chain.summary),
            ("SongTitle", song.title if song is not None else None),
            ("SongArtist", song.artist if song is not None else None),
            ("ClipWindow", chain.clip_window),
        ]
        lines = ['<?xml version="1.0" encoding="UTF-8"?>', f"<{CREATOR}>"]
        for tag, value in fields:
            lines.append(f"  <{tag}>{xml_escape(value) if value else ''}</{tag}>")
        lines.append(f"</{CREATOR}>")
        return pretty_xml("\n".join(lines))

    def build(self, chain: PluginChain) -> bytes:
        return build_zip_archive([
            ArchiveEntry(PRESET_INFO_PATH, encode_utf8(self.build_preset_info(chain))),
            ArchiveEntry(USER_DATA_PATH, encode_utf8(self.build_user_data(chain))),
        ])
