"""
Protocol definitions for preset serializer implementations.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import PluginChain, SerializedPreset


@runtime_checkable
class PresetSerializer(Protocol):
    """Protocol for writers that turn a chain into a DAW preset file."""

    id: str
    label: str
    file_extension: str

    def can_handle(self, daw: str) -> bool:
        """Check whether this serializer writes presets for a DAW.

        Args:
            daw: Canonical DAW identifier, e.g. "fl_studio".

        Returns:
            True if this serializer handles the DAW, False otherwise.
        """
        ...

    def serialize(self, chain: PluginChain) -> SerializedPreset:
        """Serialize a chain without mutating it.

        Args:
            chain: The chain to serialize.

        Returns:
            SerializedPreset carrying the file bytes and metadata.
        """
        ...
