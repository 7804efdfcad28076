"""
Base serializer class implementing common functionality for all preset writers.
"""

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, List, Optional, Tuple

from .constants import MIME_OCTET_STREAM, PLACEHOLDER_PARAMETER
from .models import PluginChain, PluginChainPlugin, SerializedPreset
from .utils import ParameterEntry, preset_basename, resolve_identifier, resolve_parameter_entries

logger = logging.getLogger(__name__)


class BaseSerializer(ABC):
    """Base class for preset serializer implementations.

    Subclasses declare their format through class attributes and implement
    `build`, which turns a chain into the raw file bytes.
    """

    id: ClassVar[str]
    label: ClassVar[str]
    # Canonical DAW id first, then accepted aliases
    daw_ids: ClassVar[Tuple[str, ...]] = ()
    format_label: ClassVar[str] = ""
    file_extension: ClassVar[str]
    mime: ClassVar[str] = MIME_OCTET_STREAM
    # Identifier slots tried in order before falling back to the plugin name
    identifier_keys: ClassVar[Tuple[str, ...]] = ("generic",)
    filename_suffix: ClassVar[str] = "preset"
    placeholder_parameter: ClassVar[Optional[ParameterEntry]] = PLACEHOLDER_PARAMETER
    is_native: ClassVar[bool] = True

    @property
    def daw_id(self) -> str:
        """Return the canonical DAW identifier this serializer targets."""
        return self.daw_ids[0]

    def can_handle(self, daw: str) -> bool:
        """Check whether this serializer writes presets for a DAW.

        Args:
            daw: Canonical DAW identifier.

        Returns:
            True if `daw` is the canonical id or one of its aliases.
        """
        return daw in self.daw_ids

    @abstractmethod
    def build(self, chain: PluginChain) -> bytes:
        """Render the chain into the target file format.

        Args:
            chain: The chain to render.

        Returns:
            Raw file bytes.
        """
        ...

    def build_filename(self, chain: PluginChain) -> str:
        """Derive the output filename for a chain."""
        return f"{preset_basename(chain, self.filename_suffix)}{self.file_extension}"

    def serialize(self, chain: PluginChain) -> SerializedPreset:
        """Serialize a chain into a SerializedPreset.

        Args:
            chain: The chain to serialize. It is never modified.

        Returns:
            SerializedPreset with the file bytes and metadata.

        Raises:
            ArchiveWriteError: If the underlying container writer fails.
        """
        data = self.build(chain)
        filename = self.build_filename(chain)
        logger.debug(
            f"{self.id} wrote {len(data)} bytes for {len(chain.plugins)} plugins as {filename}"
        )
        return SerializedPreset(
            filename=filename,
            mime=self.mime,
            data=data,
            serializer_id=self.id,
            label=self.label,
            is_native=self.is_native,
        )

    def identifier_for(self, plugin: PluginChainPlugin) -> str:
        """Resolve the identifier written for a plugin in this format."""
        return resolve_identifier(plugin, self.identifier_keys)

    def parameters_for(self, plugin: PluginChainPlugin) -> List[ParameterEntry]:
        """Resolve the `(name, value)` parameter entries written for a plugin."""
        return resolve_parameter_entries(plugin, self.placeholder_parameter)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
