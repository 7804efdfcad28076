"""
Writes Logic Pro channel-strip patches (.patch).

Logic stores patches as bundles; we ship the bundle as a zip archive holding
an `Info.plist` descriptor and a `ChannelStrip.xml` plugin list.
"""

import logging
import plistlib
from typing import Any, Dict, List

from ..archive import ArchiveEntry, build_zip_archive
from ..base_serializer import BaseSerializer
from ..constants import CREATOR, LOGIC_PATCH_VERSION, MIME_ZIP
from ..exceptions import ArchiveWriteError
from ..models import PluginChain, PluginChainPlugin
from ..utils import encode_utf8, pretty_xml, replace_control_chars, sort_chain_plugins, xml_escape

logger = logging.getLogger(__name__)

PATCH_ROOT = "Patch"
INFO_PLIST_PATH = f"{PATCH_ROOT}/Info.plist"
CHANNEL_STRIP_PATH = f"{PATCH_ROOT}/ChannelStrip.xml"


class LogicPatchSerializer(BaseSerializer):
    """Serializer for Logic channel-strip patches."""

    id = "logic-patch"
    label = "Logic Channel Strip"
    daw_ids = ("logic_pro", "logic")
    format_label = "Logic Channel Strip (.patch)"
    file_extension = ".patch"
    mime = MIME_ZIP
    identifier_keys = ("logic", "au", "generic")

    def build_info(self, chain: PluginChain) -> Dict[str, Any]:
        """Collect the patch descriptor. Plists have no null, so gaps become empty strings."""
        song = chain.song
        title = song.title if song is not None else None
        info: Dict[str, Any] = {
            "Name": title or chain.summary or f"{CREATOR} Patch",
            "Creator": CREATOR,
            "Version": LOGIC_PATCH_VERSION,
            "DAW": chain.daw,
            "Summary": chain.summary or "",
            "ClipWindow": chain.clip_window or "",
            "SongTitle": title or "",
            "SongArtist": (song.artist if song is not None else None) or "",
            "PluginCount": len(chain.plugins),
        }
        return {key: replace_control_chars(value) if isinstance(value, str) else value for key, value in info.items()}

    def build_info_plist(self, chain: PluginChain) -> bytes:
        """Render `Info.plist` as an XML property list."""
        try:
            return plistlib.dumps(self.build_info(chain), fmt=plistlib.FMT_XML, sort_keys=False)
        except (TypeError, OverflowError, ValueError) as e:
            logger.error(f"Failed to write patch descriptor: {e}")
            raise ArchiveWriteError("plist", str(e)) from e

    def _format_plugin(self, plugin: PluginChainPlugin, slot: int) -> List[str]:
        bypassed = "true" if plugin.bypassed else "false"
        notes = xml_escape(plugin.comment) if plugin.comment else ""
        manufacturer = xml_escape(plugin.vendor) if plugin.vendor else ""
        lines = [
            f'    <AudioUnit slot="{slot}" name="{xml_escape(plugin.name)}" '
            f'identifier="{xml_escape(self.identifier_for(plugin))}" type="{xml_escape(plugin.type)}" '
            f'manufacturer="{manufacturer}" bypassed="{bypassed}">',
            "      <Parameters>",
        ]
        for index, (name, value) in enumerate(self.parameters_for(plugin)):
            lines.append(
                f'        <Parameter index="{index}" name="{xml_escape(name)}" value="{xml_escape(value)}"/>'
            )
        lines.extend([
            "      </Parameters>",
            f"      <Notes>{notes}</Notes>",
            "    </AudioUnit>",
        ])
        return lines

    def build_channel_strip(self, chain: PluginChain) -> str:
        """Render `ChannelStrip.xml`."""
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<ChannelStrip creator="{CREATOR}" daw="{xml_escape(chain.daw)}">',
            "  <Plugins>",
        ]
        for slot, plugin in enumerate(sort_chain_plugins(chain)):
            lines.extend(self._format_plugin(plugin, slot))
        lines.extend(["  </Plugins>", "</ChannelStrip>"])
        return pretty_xml("\n".join(lines))

    def build(self, chain: PluginChain) -> bytes:
        return build_zip_archive([
            ArchiveEntry(INFO_PLIST_PATH, self.build_info_plist(chain)),
            ArchiveEntry(CHANNEL_STRIP_PATH, encode_utf8(self.build_channel_strip(chain))),
        ])
