# toneterminal_presets/models.py
"""
Dataclasses for representing plugin chains and serialized presets.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional, Tuple

# Identifier slots in the order they are declared on PluginIdentifierMap
IDENTIFIER_KEYS: Tuple[str, ...] = (
    "generic",
    "vst3",
    "vst2",
    "au",
    "aax",
    "clap",
    "fl_studio",
    "ableton",
    "logic",
    "pro_tools",
    "studio_one",
    "reaper",
)


@dataclass
class PluginParameter:
    """A single named control of a plugin.

    `value` is always a string, possibly empty. The numeric fields are hints
    carried through to generic exports; native writers only use `label`/`id`
    and `value`.
    """
    id: str
    value: str = ""
    label: Optional[str] = None
    normalized: Optional[float] = None # 0..1
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    unit: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.label or self.id


@dataclass
class PluginIdentifierMap:
    """Per-target identifiers used to locate a plugin in a host.

    Every slot is optional; None means no identifier is known for that target.
    """
    generic: Optional[str] = None
    vst3: Optional[str] = None
    vst2: Optional[str] = None
    au: Optional[str] = None
    aax: Optional[str] = None
    clap: Optional[str] = None
    fl_studio: Optional[str] = None
    ableton: Optional[str] = None
    logic: Optional[str] = None
    pro_tools: Optional[str] = None
    studio_one: Optional[str] = None
    reaper: Optional[str] = None

    def get(self, key: str) -> Optional[str]:
        """Return the identifier for `key`, or None when unset or unknown."""
        if key not in IDENTIFIER_KEYS:
            return None
        return getattr(self, key) or None

    def items(self) -> List[Tuple[str, str]]:
        """Return the populated slots in declaration order."""
        return [(f.name, getattr(self, f.name)) for f in fields(self) if getattr(self, f.name)]

    def is_empty(self) -> bool:
        return not self.items()


@dataclass
class PluginChainPlugin:
    """One plugin instance within a chain."""
    name: str # Display name
    type: str # Category string, e.g. "Equalizer"

    # Legacy name -> value representation; `parameters` wins when non-empty
    settings: Dict[str, str] = field(default_factory=dict)

    comment: Optional[str] = None
    vendor: Optional[str] = None
    category: Optional[str] = None
    identifiers: Optional[PluginIdentifierMap] = None
    parameters: Optional[List[PluginParameter]] = None
    bypassed: bool = False

    # Explicit position override; plugins without one keep their list index
    slot_index: Optional[int] = None
    tags: Optional[List[str]] = None


@dataclass
class SongInfo:
    """Reference song metadata attached to a chain."""
    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    timecode: Optional[str] = None


@dataclass
class PluginChain:
    """An ordered plugin chain targeting one DAW."""
    daw: str # Free text or display label, e.g. "FL Studio"
    plugins: List[PluginChainPlugin] = field(default_factory=list)
    daw_id: Optional[str] = None # Canonical identifier, resolved by the registry if absent
    summary: Optional[str] = None
    song: Optional[SongInfo] = None
    clip_window: Optional[str] = None


@dataclass
class SerializedPreset:
    """The result of serializing a chain for a target format."""
    filename: str
    mime: str
    data: bytes
    serializer_id: str
    label: str
    is_native: bool
