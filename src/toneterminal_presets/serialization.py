"""
Conversion between chain models and their plain JSON shape.

`dict_to_chain` applies the same coercions the web client relies on: fields
of the wrong type are dropped or defaulted rather than rejected, so any chain
that reaches a serializer is well formed.
"""

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .constants import CHAIN_FILE_SUFFIXES
from .exceptions import ChainFormatError
from .models import (
    IDENTIFIER_KEYS,
    PluginChain,
    PluginChainPlugin,
    PluginIdentifierMap,
    PluginParameter,
    SongInfo,
)
from .types import (
    SerializedChain,
    SerializedIdentifierMap,
    SerializedParameter,
    SerializedPlugin,
    SerializedSong,
    is_finite_number,
    is_non_empty_string,
    is_scalar_value,
)

logger = logging.getLogger(__name__)

# Model attribute -> JSON key, for the slots whose names differ
_IDENTIFIER_JSON_KEYS: Dict[str, str] = {
    "fl_studio": "flStudio",
    "pro_tools": "proTools",
    "studio_one": "studioOne",
}
_IDENTIFIER_MODEL_KEYS: Dict[str, str] = {v: k for k, v in _IDENTIFIER_JSON_KEYS.items()}

UNNAMED_PLUGIN = "Unnamed Plugin"
UNKNOWN_PLUGIN_TYPE = "Unknown"


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _scalar_to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ChainSerializer:
    """Handles conversion of chains to and from plain dictionaries."""

    @staticmethod
    def parameter_to_dict(param: PluginParameter) -> SerializedParameter:
        """Convert PluginParameter to a serializable dictionary.

        Optional fields are only included when set.
        """
        result: SerializedParameter = {"id": param.id, "value": param.value}
        if param.label is not None:
            result["label"] = param.label
        if param.normalized is not None:
            result["normalized"] = param.normalized
        if param.min is not None:
            result["min"] = param.min
        if param.max is not None:
            result["max"] = param.max
        if param.step is not None:
            result["step"] = param.step
        if param.unit is not None:
            result["unit"] = param.unit
        return result

    @staticmethod
    def dict_to_parameter(data: Any) -> Optional[PluginParameter]:
        """Convert a dictionary to PluginParameter.

        The id may come from `id`, `parameter` or `name`; the value from
        `value`, `current` or `default`. Numbers and booleans are stringified.

        Returns:
            PluginParameter if the entry has a usable id and value, None otherwise.
        """
        if not isinstance(data, dict):
            return None

        param_id = next(
            (data[key] for key in ("id", "parameter", "name") if data.get(key) is not None), None
        )
        if not is_non_empty_string(param_id):
            return None

        value = next(
            (data[key] for key in ("value", "current", "default") if data.get(key) is not None), None
        )
        if not is_scalar_value(value):
            return None

        param = PluginParameter(id=param_id, value=_scalar_to_str(value))
        if is_non_empty_string(data.get("label")):
            param.label = data["label"]
        if is_finite_number(data.get("normalized")):
            param.normalized = float(data["normalized"])
        if is_finite_number(data.get("min")):
            param.min = float(data["min"])
        if is_finite_number(data.get("max")):
            param.max = float(data["max"])
        if is_finite_number(data.get("step")):
            param.step = float(data["step"])
        if is_non_empty_string(data.get("unit")):
            param.unit = data["unit"]
        return param

    @staticmethod
    def identifiers_to_dict(identifiers: PluginIdentifierMap) -> SerializedIdentifierMap:
        result: Dict[str, str] = {}
        for key, value in identifiers.items():
            result[_IDENTIFIER_JSON_KEYS.get(key, key)] = value
        return result  # type: ignore[return-value]

    @staticmethod
    def dict_to_identifiers(data: Any) -> Optional[PluginIdentifierMap]:
        """Keep non-empty string identifiers; None when nothing usable remains."""
        if not isinstance(data, dict):
            return None
        identifiers = PluginIdentifierMap()
        for key, value in data.items():
            model_key = _IDENTIFIER_MODEL_KEYS.get(key, key)
            if model_key in IDENTIFIER_KEYS and is_non_empty_string(value):
                setattr(identifiers, model_key, value)
        return None if identifiers.is_empty() else identifiers

    @staticmethod
    def plugin_to_dict(plugin: PluginChainPlugin) -> SerializedPlugin:
        """Convert PluginChainPlugin to a serializable dictionary."""
        result: SerializedPlugin = {
            "name": plugin.name,
            "type": plugin.type,
            "settings": dict(plugin.settings),
            "comment": plugin.comment,
            "vendor": plugin.vendor,
            "category": plugin.category,
            "identifiers": (
                ChainSerializer.identifiers_to_dict(plugin.identifiers)
                if plugin.identifiers is not None
                else None
            ),
            "parameters": (
                [ChainSerializer.parameter_to_dict(param) for param in plugin.parameters]
                if plugin.parameters is not None
                else None
            ),
            "bypassed": plugin.bypassed,
            "tags": list(plugin.tags) if plugin.tags is not None else None,
        }
        if plugin.slot_index is not None:
            result["slotIndex"] = plugin.slot_index
        return result

    @staticmethod
    def dict_to_plugin(data: Any) -> Optional[PluginChainPlugin]:
        """Convert a dictionary to PluginChainPlugin.

        Returns:
            PluginChainPlugin, or None if `data` is not a dictionary.
        """
        if not isinstance(data, dict):
            return None

        comment = _optional_str(data.get("comment"))
        if comment is None:
            comment = _optional_str(data.get("summary"))

        settings: Dict[str, str] = {}
        raw_settings = data.get("settings")
        if isinstance(raw_settings, dict):
            for key, value in raw_settings.items():
                if isinstance(key, str) and (isinstance(value, str) or is_finite_number(value)):
                    settings[key] = _scalar_to_str(value)

        parameters: Optional[List[PluginParameter]] = None
        raw_parameters = data.get("parameters")
        if isinstance(raw_parameters, list):
            parsed = [ChainSerializer.dict_to_parameter(entry) for entry in raw_parameters]
            parameters = [param for param in parsed if param is not None] or None

        tags: Optional[List[str]] = None
        raw_tags = data.get("tags")
        if isinstance(raw_tags, list) and all(isinstance(tag, str) for tag in raw_tags):
            tags = [tag.strip() for tag in raw_tags if tag.strip()] or None

        slot_index: Optional[int] = None
        for key in ("slotIndex", "slot"):
            if is_finite_number(data.get(key)):
                slot_index = max(0, math.floor(data[key]))
                break

        bypassed = data.get("bypassed")
        name = data.get("name")
        plugin_type = data.get("type")

        return PluginChainPlugin(
            name=name if isinstance(name, str) else UNNAMED_PLUGIN,
            type=plugin_type if isinstance(plugin_type, str) else UNKNOWN_PLUGIN_TYPE,
            settings=settings,
            comment=comment,
            vendor=_optional_str(data.get("vendor")),
            category=_optional_str(data.get("category")),
            identifiers=ChainSerializer.dict_to_identifiers(data.get("identifiers")),
            parameters=parameters,
            bypassed=bypassed if isinstance(bypassed, bool) else False,
            slot_index=slot_index,
            tags=tags,
        )

    @staticmethod
    def song_to_dict(song: SongInfo) -> SerializedSong:
        return {
            "title": song.title,
            "artist": song.artist,
            "album": song.album,
            "timecode": song.timecode,
        }

    @staticmethod
    def dict_to_song(data: Any) -> Optional[SongInfo]:
        if not isinstance(data, dict):
            return None
        return SongInfo(
            title=_optional_str(data.get("title")),
            artist=_optional_str(data.get("artist")),
            album=_optional_str(data.get("album")),
            timecode=_optional_str(data.get("timecode")),
        )

    @classmethod
    def chain_to_dict(cls, chain: PluginChain) -> SerializedChain:
        """Convert PluginChain to a serializable dictionary.

        Args:
            chain: PluginChain to serialize.

        Returns:
            SerializedChain dictionary, suitable for `json.dumps`.
        """
        return {
            "daw": chain.daw,
            "dawId": chain.daw_id,
            "summary": chain.summary,
            "clipWindow": chain.clip_window,
            "song": cls.song_to_dict(chain.song) if chain.song is not None else None,
            "plugins": [cls.plugin_to_dict(plugin) for plugin in chain.plugins],
        }

    @classmethod
    def dict_to_chain(cls, data: Any, source: str = "<payload>") -> PluginChain:
        """Convert a dictionary to PluginChain.

        Args:
            data: Parsed chain payload.
            source: Where the payload came from, used in error messages.

        Returns:
            PluginChain built from the payload.

        Raises:
            ChainFormatError: If the payload is not a mapping or has no DAW.
        """
        if not isinstance(data, dict):
            raise ChainFormatError(source, "expected a mapping at the top level")

        daw = data.get("daw")
        if not is_non_empty_string(daw):
            raise ChainFormatError(source, "missing DAW identifier")

        plugins: List[PluginChainPlugin] = []
        raw_plugins = data.get("plugins")
        if isinstance(raw_plugins, list):
            for index, entry in enumerate(raw_plugins):
                plugin = cls.dict_to_plugin(entry)
                if plugin is None:
                    logger.warning(f"Skipping invalid plugin entry #{index} in {source}")
                    continue
                plugins.append(plugin)

        daw_id = data.get("dawId")
        return PluginChain(
            daw=daw,
            plugins=plugins,
            daw_id=daw_id if is_non_empty_string(daw_id) else None,
            summary=_optional_str(data.get("summary")),
            song=cls.dict_to_song(data.get("song")),
            clip_window=_optional_str(data.get("clipWindow")),
        )

    @classmethod
    def load_chain(cls, path: Path) -> PluginChain:
        """Load a chain from a JSON or YAML file.

        Args:
            path: Path to a `.json`, `.yaml` or `.yml` file.

        Returns:
            PluginChain read from the file.

        Raises:
            ChainFormatError: If the file is missing, unsupported or malformed.
        """
        if path.suffix.lower() not in CHAIN_FILE_SUFFIXES:
            raise ChainFormatError(
                str(path), f"unsupported file type, expected one of {', '.join(CHAIN_FILE_SUFFIXES)}"
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in chain file {path}: {e}")
            raise ChainFormatError(str(path), f"JSON decode error: {e}") from e
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML in chain file {path}: {e}")
            raise ChainFormatError(str(path), f"YAML error: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read chain file {path}: {e}")
            raise ChainFormatError(str(path), str(e)) from e

        chain = cls.dict_to_chain(data, source=str(path))
        logger.info(f"Loaded chain with {len(chain.plugins)} plugins from {path}")
        return chain
