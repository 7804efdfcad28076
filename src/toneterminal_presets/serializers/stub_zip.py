"""
Generic fallback: a zip archive with manual setup instructions.

Used for every DAW without a native serializer. The archive holds a
human-readable `README.txt`, the full chain as `chain.json` and a one line per
plugin `clipboard.txt`.
"""

import json
import re
from typing import List, Optional

from ..archive import ArchiveEntry, build_zip_archive
from ..base_serializer import BaseSerializer
from ..constants import CREATOR, MIME_ZIP, STUB_FILENAME_FALLBACK, STUB_FILENAME_SUFFIX
from ..models import PluginChain, PluginChainPlugin
from ..serialization import ChainSerializer
from ..utils import parameter_entries, sort_chain_plugins

README_PATH = "README.txt"
CHAIN_JSON_PATH = "chain.json"
CLIPBOARD_PATH = "clipboard.txt"

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]+")

MANUAL_STEPS = (
    "1. Insert the listed plugins in order.",
    "2. Apply the suggested settings and notes.",
    "3. Save the chain within your DAW for future use.",
)


class StubZipSerializer(BaseSerializer):
    """Fallback serializer accepting any DAW."""

    id = "stub-zip"
    label = "Stub ZIP Export"
    format_label = "Manual setup archive (.zip)"
    file_extension = ".zip"
    mime = MIME_ZIP
    placeholder_parameter = None
    is_native = False

    def can_handle(self, daw: str) -> bool:
        return True

    def build_filename(self, chain: PluginChain) -> str:
        """Name the archive after the DAW only; song and summary are ignored."""
        safe_daw = _NON_ALPHANUMERIC.sub("_", chain.daw).lower()
        return f"{safe_daw or STUB_FILENAME_FALLBACK}{STUB_FILENAME_SUFFIX}"

    def _reference_line(self, chain: PluginChain) -> Optional[str]:
        if chain.song is None:
            return None
        timecode = f" ({chain.song.timecode})" if chain.song.timecode else ""
        return f"Reference: {chain.song.title or 'Unknown'} - {chain.song.artist or 'Unknown'}{timecode}"

    def _format_readme_plugin(self, position: int, plugin: PluginChainPlugin) -> str:
        lines = [f"{position}. {plugin.name} ({plugin.type})"]
        entries = parameter_entries(plugin)
        if entries:
            lines.append("    Settings:")
            lines.extend(f"      - {name}: {value}" for name, value in entries)
        else:
            lines.append("    Settings: (use defaults)")
        if plugin.bypassed:
            lines.append("    State: bypassed")
        if plugin.comment:
            lines.append(f"    Notes: {plugin.comment}")
        return "\n".join(lines)

    def build_readme(self, chain: PluginChain) -> str:
        """Render the manual setup instructions."""
        title = f"{CREATOR} Export Stub"
        header: List[Optional[str]] = [
            title,
            "=" * len(title),
            "",
            f"DAW: {chain.daw}",
            f"Clip window analyzed: {chain.clip_window}" if chain.clip_window else None,
            self._reference_line(chain),
            f"Summary: {chain.summary}" if chain.summary else None,
            "",
            "This DAW does not yet have a native preset exporter.",
            "Follow these steps to recreate the chain manually:",
            "",
            *MANUAL_STEPS,
            "",
            "Plugin Chain:",
        ]
        instructions = "\n".join(line for line in header if line is not None)
        plugins = "\n\n".join(
            self._format_readme_plugin(position, plugin)
            for position, plugin in enumerate(sort_chain_plugins(chain), start=1)
        )
        return f"{instructions}\n\n{plugins}\n"

    def build_clipboard(self, chain: PluginChain) -> str:
        """Render one compact line per plugin."""
        lines = []
        for position, plugin in enumerate(sort_chain_plugins(chain), start=1):
            settings = " | ".join(f"{name}: {value}" for name, value in parameter_entries(plugin))
            line = f"{position}. {plugin.name} ({plugin.type})"
            if settings:
                line += f" -> {settings}"
            if plugin.comment:
                line += f" // {plugin.comment}"
            lines.append(line)
        return "\n".join(lines)

    def build_chain_json(self, chain: PluginChain) -> str:
        return json.dumps(ChainSerializer.chain_to_dict(chain), indent=2, ensure_ascii=False)

    def build(self, chain: PluginChain) -> bytes:
        return build_zip_archive([
            ArchiveEntry(README_PATH, self.build_readme(chain)),
            ArchiveEntry(CHAIN_JSON_PATH, self.build_chain_json(chain)),
            ArchiveEntry(CLIPBOARD_PATH, self.build_clipboard(chain)),
        ])
