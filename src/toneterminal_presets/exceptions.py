"""
Custom exception hierarchy for toneterminal_presets.
"""

from typing import Optional


class PresetError(Exception):
    """Base exception for all preset export errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        """Initialize the exception with a message and optional details.

        Args:
            message: Main error message.
            details: Optional additional details about the error.
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class SerializerError(PresetError):
    """Base exception for serializer-related errors."""
    pass


class ArchiveWriteError(SerializerError):
    """Raised when a container writer (zip, gzip, plist) fails to produce output."""

    def __init__(self, container: str, reason: Optional[str] = None):
        """Initialize the exception.

        Args:
            container: Kind of container being written (e.g. 'zip', 'gzip').
            reason: Optional reason for the failure.
        """
        message = f"Failed to write {container} container"
        super().__init__(message, reason)
        self.container = container


class SerializerNotFoundError(SerializerError):
    """Raised when a serializer is requested by an id nobody registered."""

    def __init__(self, serializer_id: str, known_ids: Optional[list[str]] = None):
        """Initialize the exception.

        Args:
            serializer_id: The requested serializer id.
            known_ids: Optional list of registered serializer ids.
        """
        message = f"No serializer registered with id '{serializer_id}'"
        if known_ids:
            details = f"Known serializers: {', '.join(known_ids)}"
        else:
            details = None
        super().__init__(message, details)
        self.serializer_id = serializer_id
        self.known_ids = known_ids or []


class ChainError(PresetError):
    """Base exception for chain input errors."""
    pass


class ChainFormatError(ChainError):
    """Raised when a chain file or payload cannot be read."""

    def __init__(self, source: str, reason: Optional[str] = None):
        """Initialize the exception.

        Args:
            source: Path or description of the chain source.
            reason: Optional reason for the failure.
        """
        message = f"Invalid chain data: {source}"
        super().__init__(message, reason)
        self.source = source
