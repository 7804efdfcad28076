"""
Writes FL Studio mixer-state (.fst) files.

The format is line oriented: an INI-like header section followed by one
`[SlotN]` section per plugin. Every value passes through `escape_value` so no
value can break a line or introduce an extra `=` delimiter.
"""

from typing import List

from ..base_serializer import BaseSerializer
from ..constants import CREATOR, FST_VERSION, MIME_OCTET_STREAM
from ..models import PluginChain, PluginChainPlugin
from ..utils import encode_utf8, escape_value, sort_chain_plugins


class FlStudioFstSerializer(BaseSerializer):
    """Serializer for FL Studio mixer state files."""

    id = "fl-studio-fst"
    label = "FL Studio Mixer State"
    daw_ids = ("fl_studio", "flstudio")
    format_label = "FL Studio Mixer State (.fst)"
    file_extension = ".fst"
    mime = MIME_OCTET_STREAM
    identifier_keys = ("fl_studio", "vst3", "generic")
    filename_suffix = "chain"

    def _format_header(self, chain: PluginChain, slot_count: int) -> List[str]:
        lines = [
            "[ToneTerminalFST]",
            f"Version={FST_VERSION}",
            f"CreatedBy={CREATOR}",
            f"DAW={escape_value(chain.daw)}",
        ]
        if chain.song is not None and chain.song.title:
            lines.append(f"Song={escape_value(chain.song.title)}")
        if chain.clip_window:
            lines.append(f"ClipWindow={escape_value(chain.clip_window)}")
        if chain.summary:
            lines.append(f"Summary={escape_value(chain.summary)}")
        lines.append(f"SlotCount={slot_count}")
        return lines

    def _format_slot(self, index: int, plugin: PluginChainPlugin) -> List[str]:
        lines = [
            f"[Slot{index}]",
            f"Name={escape_value(self.identifier_for(plugin))}",
            f"DisplayName={escape_value(plugin.name)}",
            f"Type={escape_value(plugin.type)}",
            f"State={'Bypassed' if plugin.bypassed else 'Active'}",
        ]
        if plugin.comment:
            lines.append(f"Comment={escape_value(plugin.comment)}")
        for param_index, (name, value) in enumerate(self.parameters_for(plugin)):
            lines.append(f"Param{param_index}={escape_value(name)}={escape_value(value)}")
        return lines

    def build(self, chain: PluginChain) -> bytes:
        ordered = sort_chain_plugins(chain)
        sections = ["\n".join(self._format_header(chain, len(ordered)))]
        sections.extend(
            "\n".join(self._format_slot(index, plugin))
            for index, plugin in enumerate(ordered)
        )
        return encode_utf8("\n\n".join(sections) + "\n")
