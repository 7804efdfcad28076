"""
Writes Ableton Live device racks (.adg): gzip-compressed XML.
"""

from typing import List

from ..archive import gzip_bytes
from ..base_serializer import BaseSerializer
from ..constants import ABLETON_MAJOR_VERSION, ABLETON_MINOR_VERSION, CREATOR, GZIP_LEVEL, MIME_GZIP
from ..models import PluginChain, PluginChainPlugin
from ..utils import encode_utf8, pretty_xml, sort_chain_plugins, xml_escape

_DEVICE_INDENT = " " * 8


class AbletonAdgSerializer(BaseSerializer):
    """Serializer for Ableton device racks."""

    id = "ableton-adg"
    label = "Ableton Device Rack"
    daw_ids = ("ableton_live", "ableton")
    format_label = "Ableton Device Rack (.adg)"
    file_extension = ".adg"
    mime = MIME_GZIP
    identifier_keys = ("ableton", "vst3", "generic")
    filename_suffix = "rack"

    def _format_device(self, plugin: PluginChainPlugin, index: int) -> List[str]:
        enabled = "false" if plugin.bypassed else "true"
        comment = xml_escape(plugin.comment) if plugin.comment else ""
        lines = [
            "<Device>",
            "  <AudioEffect>",
            "    <PluginDevice>",
            '      <PluginType Value="VST3"/>',
            f'      <IsEnabled Value="{enabled}"/>',
            f'      <PresetName Value="{xml_escape(plugin.name)}"/>',
            f'      <UserName Value="{xml_escape(plugin.name)}"/>',
            "      <PluginDesc>",
            f'        <PluginIdentifier Value="{xml_escape(self.identifier_for(plugin))}"/>',
            "      </PluginDesc>",
            "      <Parameters>",
        ]
        for name, value in self.parameters_for(plugin):
            lines.extend([
                "        <PlugInParameter>",
                f'          <Id Value="{xml_escape(name)}"/>',
                f'          <Value Value="{xml_escape(value)}"/>',
                "        </PlugInParameter>",
            ])
        lines.extend([
            "      </Parameters>",
            f'      <UserComment Value="{comment}"/>',
            f'      <PresentationIndex Value="{index}"/>',
            "    </PluginDevice>",
            "  </AudioEffect>",
            "</Device>",
        ])
        return lines

    def build_xml(self, chain: PluginChain) -> str:
        """Render the uncompressed rack document."""
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<Ableton MajorVersion="{ABLETON_MAJOR_VERSION}" MinorVersion="{ABLETON_MINOR_VERSION}" '
            f'SchemaChangeCount="0" Creator="{CREATOR}">',
            "  <DeviceGroup>",
        ]
        if chain.summary:
            lines.append(f'    <Annotation Author="{CREATOR}">{xml_escape(chain.summary)}</Annotation>')
        lines.extend([
            "    <DeviceChain>",
            "      <Devices>",
        ])
        for index, plugin in enumerate(sort_chain_plugins(chain)):
            lines.extend(_DEVICE_INDENT + line for line in self._format_device(plugin, index))
        lines.extend([
            "      </Devices>",
            "    </DeviceChain>",
            "  </DeviceGroup>",
            "</Ableton>",
        ])
        return pretty_xml("\n".join(lines))

    def build(self, chain: PluginChain) -> bytes:
        return gzip_bytes(encode_utf8(self.build_xml(chain)), level=GZIP_LEVEL)
