"""Serialize plugin chains into DAW-native preset files."""

from .constants import APP_VERSION as __version__
from .daws import daw_id_to_label, label_to_daw_id
from .exceptions import (
    ArchiveWriteError,
    ChainError,
    ChainFormatError,
    PresetError,
    SerializerError,
    SerializerNotFoundError,
)
from .models import (
    PluginChain,
    PluginChainPlugin,
    PluginIdentifierMap,
    PluginParameter,
    SerializedPreset,
    SongInfo,
)
from .registry import (
    DEFAULT_REGISTRY,
    NATIVE_EXPORTERS,
    SerializerRegistry,
    get_exporter_coverage,
    get_serializer,
    has_native_exporter,
    resolve_native_exporter_key,
    serialize_preset,
    serialize_preset_async,
)
from .serialization import ChainSerializer

__all__ = [
    "__version__",
    "ArchiveWriteError",
    "ChainError",
    "ChainFormatError",
    "ChainSerializer",
    "DEFAULT_REGISTRY",
    "NATIVE_EXPORTERS",
    "PluginChain",
    "PluginChainPlugin",
    "PluginIdentifierMap",
    "PluginParameter",
    "PresetError",
    "SerializedPreset",
    "SerializerError",
    "SerializerNotFoundError",
    "SerializerRegistry",
    "SongInfo",
    "daw_id_to_label",
    "get_exporter_coverage",
    "get_serializer",
    "has_native_exporter",
    "label_to_daw_id",
    "resolve_native_exporter_key",
    "serialize_preset",
    "serialize_preset_async",
]
