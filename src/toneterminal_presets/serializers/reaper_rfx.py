"""
Writes Reaper FX chains (.rfxchain).

Each plugin becomes a `BYPASS` line followed by a `<VST ...>` block. Reaper
keeps plugin state as base64 inside the block; we store the parameter list
there as `name=value` lines so the chain can be inspected and re-applied.
"""

import base64
from typing import List

from ..base_serializer import BaseSerializer
from ..constants import MIME_OCTET_STREAM
from ..models import PluginChain, PluginChainPlugin
from ..utils import encode_utf8, escape_value, sort_chain_plugins

# Reaper wraps state blobs at this width
STATE_LINE_WIDTH = 128
_EMPTY_GUID = "0<00000000000000000000000000000000>"


def quote_token(value: str) -> str:
    """Quote a token the way Reaper's chunk parser expects.

    Double quotes are preferred; values that contain them fall back to single
    quotes, then backticks (with inner backticks replaced).
    """
    text = " ".join(str(value).splitlines())
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    return "`" + text.replace("`", "'") + "`"


def encode_state(lines: List[str]) -> List[str]:
    """Base64-encode state lines and wrap the result for a chunk body."""
    blob = base64.b64encode(encode_utf8("".join(f"{line}\n" for line in lines))).decode("ascii")
    return [blob[start:start + STATE_LINE_WIDTH] for start in range(0, len(blob), STATE_LINE_WIDTH)]


class ReaperRfxSerializer(BaseSerializer):
    """Serializer for Reaper FX chains."""

    id = "reaper-rfx"
    label = "Reaper FX Chain"
    daw_ids = ("reaper",)
    format_label = "Reaper RFX Chain"
    file_extension = ".rfxchain"
    mime = MIME_OCTET_STREAM
    identifier_keys = ("reaper", "vst3", "vst2", "generic")

    def _format_plugin(self, plugin: PluginChainPlugin) -> List[str]:
        display = f"VST3: {plugin.name} ({plugin.vendor})" if plugin.vendor else f"VST3: {plugin.name}"
        state = [
            f"{escape_value(name)}={escape_value(value)}"
            for name, value in self.parameters_for(plugin)
        ]
        lines = [
            f"BYPASS {1 if plugin.bypassed else 0} 0 0",
            f'<VST {quote_token(display)} {quote_token(self.identifier_for(plugin))} 0 "" {_EMPTY_GUID} ""',
        ]
        lines.extend(f"  {chunk}" for chunk in encode_state(state))
        lines.extend([
            ">",
            f"PRESETNAME {quote_token(plugin.name)}",
            "FLOATPOS 0 0 0 0",
            "WAK 0 0",
        ])
        return lines

    def build(self, chain: PluginChain) -> bytes:
        lines: List[str] = []
        for plugin in sort_chain_plugins(chain):
            lines.extend(self._format_plugin(plugin))
        return encode_utf8("".join(f"{line}\n" for line in lines))
