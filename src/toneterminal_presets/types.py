"""
Type definitions and aliases for the toneterminal_presets package.

The TypedDicts describe the plain JSON shape of a chain, as read from chain
files and written to `chain.json` in generic exports. Keys follow the camelCase
names used by the web client.
"""

import math
import sys
from typing import Any, Dict, List, Literal, Optional, TypedDict

if sys.version_info >= (3, 11):
    from typing import NotRequired
else:
    from typing_extensions import NotRequired

# Type aliases
CoverageStatus = Literal["native", "manual"]


class SerializedParameter(TypedDict):
    """TypedDict for a serialized plugin parameter."""
    id: str
    value: str
    label: NotRequired[str]
    normalized: NotRequired[float]
    min: NotRequired[float]
    max: NotRequired[float]
    step: NotRequired[float]
    unit: NotRequired[str]


class SerializedIdentifierMap(TypedDict, total=False):
    """TypedDict for a serialized identifier map."""
    generic: str
    vst3: str
    vst2: str
    au: str
    aax: str
    clap: str
    flStudio: str
    ableton: str
    logic: str
    proTools: str
    studioOne: str
    reaper: str


class SerializedSong(TypedDict):
    """TypedDict for serialized song metadata."""
    title: Optional[str]
    artist: Optional[str]
    album: Optional[str]
    timecode: Optional[str]


class SerializedPlugin(TypedDict):
    """TypedDict for a serialized chain plugin."""
    name: str
    type: str
    settings: Dict[str, str]
    comment: Optional[str]
    vendor: Optional[str]
    category: Optional[str]
    identifiers: Optional[SerializedIdentifierMap]
    parameters: Optional[List[SerializedParameter]]
    bypassed: bool
    slotIndex: NotRequired[int]
    tags: Optional[List[str]]


class SerializedChain(TypedDict):
    """TypedDict for a complete serialized chain."""
    daw: str
    dawId: Optional[str]
    summary: Optional[str]
    clipWindow: Optional[str]
    song: Optional[SerializedSong]
    plugins: List[SerializedPlugin]


class ExporterCoverage(TypedDict):
    """TypedDict describing whether a DAW has a native exporter."""
    status: CoverageStatus
    nativeFormat: NotRequired[str]
    serializerId: NotRequired[str]
    dawId: str
    label: str


# Type guards
def is_non_empty_string(value: Any) -> bool:
    """Check if a value is a string with visible content."""
    return isinstance(value, str) and value.strip() != ""


def is_finite_number(value: Any) -> bool:
    """Check if a value is a finite int or float (booleans excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_scalar_value(value: Any) -> bool:
    """Check if a value can be coerced into a parameter value string."""
    if isinstance(value, (str, bool)):
        return True
    return is_finite_number(value)
