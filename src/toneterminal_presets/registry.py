"""
Serializer registry and dispatcher.

Native serializers are scanned in registration order and the first one whose
`can_handle` accepts the DAW id wins. The generic fallback is held apart from
that list and is only used when no native serializer matches.
"""
from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Executor
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .base_serializer import BaseSerializer
from .daws import daw_id_to_label, label_to_daw_id, slugify_daw
from .exceptions import SerializerNotFoundError
from .models import PluginChain, SerializedPreset
from .protocols import PresetSerializer
from .serializers import (
    AbletonAdgSerializer,
    FlStudioFstSerializer,
    LogicPatchSerializer,
    ProToolsXmlSerializer,
    ReaperRfxSerializer,
    StudioOnePresetSerializer,
    StubZipSerializer,
)
from .types import ExporterCoverage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NativeExporterMetadata:
    """Describes the native exporter registered for a DAW."""
    id: str # Canonical DAW id
    label: str
    format_label: str
    file_extension: str
    serializer_id: str


def resolve_daw_id(chain: PluginChain) -> str:
    """Return the chain's canonical DAW id.

    Uses `chain.daw_id` when set, then the label table, then a slug of the
    free-text DAW name.
    """
    if chain.daw_id:
        return chain.daw_id
    return label_to_daw_id(chain.daw) or slugify_daw(chain.daw)


class SerializerRegistry:
    """An ordered, immutable set of native serializers plus a fallback.

    Use `with_serializer` to derive a registry with an extra format instead of
    changing call sites. The fallback only has to satisfy `PresetSerializer`.
    """

    def __init__(self, serializers: Iterable[BaseSerializer], fallback: PresetSerializer):
        self._serializers: Tuple[BaseSerializer, ...] = tuple(serializers)
        self._fallback = fallback
        exporters: Dict[str, NativeExporterMetadata] = {}
        for serializer in self._serializers:
            # Dispatch is first-match, so the first serializer owns a DAW id
            exporters.setdefault(serializer.daw_id, NativeExporterMetadata(
                id=serializer.daw_id,
                label=daw_id_to_label(serializer.daw_id),
                format_label=serializer.format_label,
                file_extension=serializer.file_extension,
                serializer_id=serializer.id,
            ))
        self._native_exporters: Mapping[str, NativeExporterMetadata] = MappingProxyType(exporters)

    @property
    def serializers(self) -> Tuple[BaseSerializer, ...]:
        """Native serializers in dispatch order."""
        return self._serializers

    @property
    def fallback(self) -> PresetSerializer:
        return self._fallback

    @property
    def native_exporters(self) -> Mapping[str, NativeExporterMetadata]:
        """Read-only mapping of canonical DAW id to native exporter metadata."""
        return self._native_exporters

    def with_serializer(self, serializer: BaseSerializer, position: Optional[int] = None) -> SerializerRegistry:
        """Return a new registry with `serializer` inserted at `position` (default: last native)."""
        serializers = list(self._serializers)
        if position is None:
            serializers.append(serializer)
        else:
            serializers.insert(position, serializer)
        return SerializerRegistry(serializers, self._fallback)

    def find_serializer(self, daw_id: str) -> PresetSerializer:
        """Return the first native serializer handling `daw_id`, else the fallback."""
        for serializer in self._serializers:
            if serializer.can_handle(daw_id):
                return serializer
        return self._fallback

    def get_serializer(self, serializer_id: str) -> PresetSerializer:
        """Look up a serializer by its id.

        Raises:
            SerializerNotFoundError: If no serializer has that id.
        """
        for serializer in (*self._serializers, self._fallback):
            if serializer.id == serializer_id:
                return serializer
        raise SerializerNotFoundError(
            serializer_id, [s.id for s in (*self._serializers, self._fallback)]
        )

    def serialize(self, chain: PluginChain) -> SerializedPreset:
        """Serialize a chain with the best available serializer.

        The chain is not modified; the serializer receives a copy with
        `daw_id` resolved.

        Raises:
            ArchiveWriteError: If the selected serializer's container writer fails.
        """
        daw_id = resolve_daw_id(chain)
        serializer = self.find_serializer(daw_id)
        if serializer is self._fallback:
            logger.debug(f"No native serializer for '{daw_id}', using {serializer.id}")
        else:
            logger.debug(f"Serializing chain for '{daw_id}' with {serializer.id}")
        return serializer.serialize(replace(chain, daw_id=daw_id))

    async def serialize_async(
        self, chain: PluginChain, executor: Optional[Executor] = None
    ) -> SerializedPreset:
        """Serialize in an executor so compression does not block the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(executor, self.serialize, chain)

    def resolve_native_exporter_key(self, daw: object) -> Optional[str]:
        """Map a DAW id, alias or label to the canonical id of its native exporter."""
        if not isinstance(daw, str) or not daw.strip():
            return None
        direct = slugify_daw(daw)
        if direct in self._native_exporters:
            return direct
        mapped = label_to_daw_id(daw)
        if mapped is not None and mapped in self._native_exporters:
            return mapped
        for serializer in self._serializers:
            if serializer.can_handle(direct):
                return serializer.daw_id
        return None

    def has_native_exporter(self, daw: object) -> bool:
        return self.resolve_native_exporter_key(daw) is not None

    def get_exporter_coverage(self, daw: str) -> ExporterCoverage:
        """Describe whether `daw` gets a native export, without serializing anything."""
        key = self.resolve_native_exporter_key(daw)
        if key is not None:
            metadata = self._native_exporters[key]
            return {
                "status": "native",
                "nativeFormat": metadata.format_label,
                "serializerId": metadata.serializer_id,
                "dawId": metadata.id,
                "label": metadata.label,
            }
        daw_id = label_to_daw_id(daw)
        return {
            "status": "manual",
            "dawId": daw_id or slugify_daw(daw),
            "label": daw_id_to_label(daw_id) if daw_id else daw,
        }


NATIVE_SERIALIZERS: Tuple[BaseSerializer, ...] = (
    ReaperRfxSerializer(),
    FlStudioFstSerializer(),
    AbletonAdgSerializer(),
    LogicPatchSerializer(),
    ProToolsXmlSerializer(),
    StudioOnePresetSerializer(),
)
FALLBACK_SERIALIZER: PresetSerializer = StubZipSerializer()

DEFAULT_REGISTRY = SerializerRegistry(NATIVE_SERIALIZERS, FALLBACK_SERIALIZER)
NATIVE_EXPORTERS: Mapping[str, NativeExporterMetadata] = DEFAULT_REGISTRY.native_exporters


def serialize_preset(chain: PluginChain) -> SerializedPreset:
    """Serialize a chain using the default registry."""
    return DEFAULT_REGISTRY.serialize(chain)


async def serialize_preset_async(
    chain: PluginChain, executor: Optional[Executor] = None
) -> SerializedPreset:
    return await DEFAULT_REGISTRY.serialize_async(chain, executor)


def get_serializer(serializer_id: str) -> PresetSerializer:
    return DEFAULT_REGISTRY.get_serializer(serializer_id)


def resolve_native_exporter_key(daw: object) -> Optional[str]:
    return DEFAULT_REGISTRY.resolve_native_exporter_key(daw)


def has_native_exporter(daw: object) -> bool:
    return DEFAULT_REGISTRY.has_native_exporter(daw)


def get_exporter_coverage(daw: str) -> ExporterCoverage:
    """Describe native-export coverage for a DAW using the default registry."""
    return DEFAULT_REGISTRY.get_exporter_coverage(daw)
