"""
Writes Pro Tools plug-in presets as plain XML.
"""

from typing import List

from ..base_serializer import BaseSerializer
from ..constants import CREATOR, MIME_XML, PRO_TOOLS_PRESET_VERSION
from ..models import PluginChain, PluginChainPlugin
from ..utils import encode_utf8, pretty_xml, sort_chain_plugins, xml_escape


class ProToolsXmlSerializer(BaseSerializer):
    """Serializer for Pro Tools XML presets."""

    id = "pro-tools-xml"
    label = "Pro Tools XML Preset"
    daw_ids = ("pro_tools", "protools")
    format_label = "Pro Tools XML Preset"
    file_extension = ".ptpreset.xml"
    mime = MIME_XML
    identifier_keys = ("pro_tools", "aax", "generic")

    def _format_meta(self, chain: PluginChain) -> List[str]:
        lines = ["  <Meta>", f"    <DAW>{xml_escape(chain.daw)}</DAW>"]
        if chain.summary:
            lines.append(f"    <Summary>{xml_escape(chain.summary)}</Summary>")
        if chain.clip_window:
            lines.append(f"    <ClipWindow>{xml_escape(chain.clip_window)}</ClipWindow>")
        if chain.song is not None:
            title = xml_escape(chain.song.title) if chain.song.title else ""
            artist = xml_escape(chain.song.artist) if chain.song.artist else ""
            lines.append(f'    <Song title="{title}" artist="{artist}"/>')
        lines.append("  </Meta>")
        return lines

    def _format_plugin(self, plugin: PluginChainPlugin) -> List[str]:
        bypassed = "true" if plugin.bypassed else "false"
        notes = xml_escape(plugin.comment) if plugin.comment else ""
        lines = [
            f'    <PlugIn name="{xml_escape(plugin.name)}" '
            f'identifier="{xml_escape(self.identifier_for(plugin))}" '
            f'category="{xml_escape(plugin.type)}" bypassed="{bypassed}">',
            f"      <Notes>{notes}</Notes>",
            "      <Parameters>",
        ]
        for index, (name, value) in enumerate(self.parameters_for(plugin)):
            lines.append(
                f'        <Parameter index="{index}" name="{xml_escape(name)}" value="{xml_escape(value)}"/>'
            )
        lines.extend(["      </Parameters>", "    </PlugIn>"])
        return lines

    def build_xml(self, chain: PluginChain) -> str:
        """Render the preset document."""
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<PlugInPreset version="{PRO_TOOLS_PRESET_VERSION}" creator="{CREATOR}">',
        ]
        lines.extend(self._format_meta(chain))
        lines.append("  <PlugIns>")
        for plugin in sort_chain_plugins(chain):
            lines.extend(self._format_plugin(plugin))
        lines.extend(["  </PlugIns>", "</PlugInPreset>"])
        return pretty_xml("\n".join(lines))

    def build(self, chain: PluginChain) -> bytes:
        return encode_utf8(self.build_xml(chain))
