"""
Shared helpers used by every preset serializer.
"""

import re
from typing import Iterable, List, Optional, Tuple

from .constants import DEFAULT_FILENAME_FALLBACK, PLACEHOLDER_PARAMETER
from .models import PluginChain, PluginChainPlugin

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")
_REPEATED_UNDERSCORES = re.compile(r"_+")
_LINE_BREAKS = re.compile(r"\r\n|\r|\n")
_WHITESPACE = re.compile(r"\s+")
# Code points XML 1.0 forbids outright, even as character references
_XML_ILLEGAL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")

# Ampersand must come first so entities produced later are not escaped twice
_XML_ENTITIES: Tuple[Tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)

ParameterEntry = Tuple[str, str]


def sanitize_filename(name: str, fallback: str = DEFAULT_FILENAME_FALLBACK) -> str:
    """Reduce `name` to a lowercase filename made of `[a-z0-9._-]`.

    Runs of other characters become a single underscore and leading or
    trailing underscores are dropped. Returns `fallback` when nothing usable
    is left, including names made only of dots.
    """
    safe = _UNSAFE_FILENAME_CHARS.sub("_", name)
    safe = _REPEATED_UNDERSCORES.sub("_", safe).strip("_").lower()
    if not safe.strip("."):
        return fallback
    return safe


def encode_utf8(value: str) -> bytes:
    return value.encode("utf-8")


def escape_value(value: object) -> str:
    """Escape a value for line-oriented `key=value` formats."""
    return _LINE_BREAKS.sub(" ", str(value)).replace("=", "-")


def replace_control_chars(value: str) -> str:
    """Replace control characters that XML and plist writers reject with a space."""
    return _XML_ILLEGAL_CHARS.sub(" ", value)


def xml_escape(value: object) -> str:
    """Escape a value for XML text and attribute content."""
    text = str(value)
    for char, entity in _XML_ENTITIES:
        text = text.replace(char, entity)
    return replace_control_chars(text)


def pretty_xml(value: str) -> str:
    """Trim a document and terminate it with exactly one newline."""
    return f"{value.strip()}\n"


def sort_chain_plugins(chain: PluginChain) -> List[PluginChainPlugin]:
    """Order plugins by `slot_index`, falling back to their list position.

    `sorted` is stable, so plugins with equal keys keep their relative order.
    """
    keyed = [
        (plugin.slot_index if plugin.slot_index is not None else index, plugin)
        for index, plugin in enumerate(chain.plugins)
    ]
    return [plugin for _, plugin in sorted(keyed, key=lambda entry: entry[0])]


def resolve_identifier(plugin: PluginChainPlugin, keys: Iterable[str]) -> str:
    """Return the first identifier present among `keys`, else the display name."""
    if plugin.identifiers is not None:
        for key in keys:
            identifier = plugin.identifiers.get(key)
            if identifier:
                return identifier
    return plugin.name


def parameter_entries(plugin: PluginChainPlugin) -> List[ParameterEntry]:
    """Return `(name, value)` pairs from `parameters`, else from `settings`."""
    if plugin.parameters:
        return [(param.display_name, param.value) for param in plugin.parameters]
    return [(name, str(value)) for name, value in plugin.settings.items()]


def resolve_parameter_entries(
    plugin: PluginChainPlugin,
    placeholder: Optional[ParameterEntry] = PLACEHOLDER_PARAMETER,
) -> List[ParameterEntry]:
    """Like `parameter_entries`, but never empty when a placeholder is given."""
    entries = parameter_entries(plugin)
    if not entries and placeholder is not None:
        return [placeholder]
    return entries


def preset_basename(chain: PluginChain, suffix: str) -> str:
    """Derive a sanitized filename stem: song title, then summary, then `<daw>_<suffix>`."""
    title = chain.song.title if chain.song is not None else None
    base = title or chain.summary or f"{_WHITESPACE.sub('_', chain.daw)}_{suffix}"
    return sanitize_filename(base)
