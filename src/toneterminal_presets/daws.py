# this_file: src/toneterminal_presets/daws.py
"""
Canonical DAW identifiers and their display labels.

The table is closed: identifiers not listed here are never inferred, callers
fall back to `slugify_daw` instead.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class DawInfo:
    label: str
    formats: Tuple[str, ...]
    export_formats: Tuple[str, ...]
    os: Tuple[str, ...]


DAWS: Mapping[str, DawInfo] = MappingProxyType({
    "fl_studio": DawInfo("FL Studio", ("VST3",), ("fst_stub",), ("mac", "win")),
    "ableton_live": DawInfo("Ableton Live", ("VST3", "AU(mac)"), ("adg_stub",), ("mac", "win")),
    "logic_pro": DawInfo("Logic Pro", ("AU",), ("patch_stub", "aupreset_stub"), ("mac",)),
    "pro_tools": DawInfo("Pro Tools", ("AAX",), ("ptx_stub",), ("mac", "win")),
    "reaper": DawInfo("Reaper", ("VST3", "AU(mac)"), ("rfxchain",), ("mac", "win")),
    "cubase": DawInfo("Cubase", ("VST3",), ("vstpreset_stub",), ("mac", "win")),
    "studio_one": DawInfo("Studio One", ("VST3", "AU(mac)"), ("preset_stub",), ("mac", "win")),
    "bitwig": DawInfo("Bitwig", ("VST3", "CLAP"), ("bwdevice_stub",), ("mac", "win")),
    "reason": DawInfo("Reason", ("VST3", "RE"), ("reason_patch_stub",), ("mac", "win")),
    "nuendo": DawInfo("Nuendo", ("VST3",), ("vstpreset_stub",), ("mac", "win")),
    "garageband": DawInfo("GarageBand", ("AU",), ("patch_stub",), ("mac",)),
    "digital_performer": DawInfo("Digital Performer", ("VST3", "AU(mac)"), ("dp_preset_stub",), ("mac", "win")),
    "samplitude": DawInfo("Samplitude", ("VST3",), ("sam_preset_stub",), ("win",)),
    "cakewalk": DawInfo("Cakewalk", ("VST3",), ("cwp_preset_stub",), ("win",)),
    "ardour": DawInfo("Ardour", ("VST3", "AU(mac)"), ("ardour_preset_stub",), ("mac", "win")),
    "mixbus": DawInfo("Harrison Mixbus", ("VST3", "AU(mac)"), ("mixbus_preset_stub",), ("mac", "win")),
    "waveform": DawInfo("Tracktion Waveform", ("VST3",), ("waveform_preset_stub",), ("mac", "win")),
})

_LABEL_TO_ID: Mapping[str, str] = MappingProxyType(
    {info.label.lower(): daw_id for daw_id, info in DAWS.items()}
)


def _capitalize_segment(segment: str) -> str:
    return segment[:1].upper() + segment[1:]


def daw_id_to_label(daw_id: str) -> str:
    """Return the registered label, or a title-cased guess for unknown ids."""
    info = DAWS.get(daw_id)
    if info is not None:
        return info.label
    return " ".join(_capitalize_segment(segment) for segment in daw_id.split("_"))


def label_to_daw_id(label: Optional[str]) -> Optional[str]:
    """Case-insensitive exact match of a display label; None when unknown."""
    if not label:
        return None
    return _LABEL_TO_ID.get(label.strip().lower())


def slugify_daw(daw: str) -> str:
    """Derive an identifier from free text: lowercase, whitespace runs to `_`."""
    return _WHITESPACE.sub("_", daw.strip().lower())


def list_daws(daw_ids: list[str]) -> list[str]:
    """Map identifiers to labels, keeping order."""
    return [daw_id_to_label(daw_id) for daw_id in daw_ids]


def get_all_daw_labels() -> dict[str, str]:
    return {daw_id: info.label for daw_id, info in DAWS.items()}
