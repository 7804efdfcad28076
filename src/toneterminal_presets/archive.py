"""
In-memory archive and compression helpers.

Both helpers are pure byte transforms. Timestamps are pinned so the same input
always produces the same bytes.
"""

import gzip
import io
import logging
import zipfile
import zlib
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .constants import (
    DEFAULT_ZIP_COMPRESSION,
    GZIP_LEVEL,
    ZIP_COMPRESSION_DEFLATE,
    ZIP_COMPRESSION_STORE,
    ZIP_FIXED_TIMESTAMP,
)
from .exceptions import ArchiveWriteError

logger = logging.getLogger(__name__)

_ZIP_METHODS = {
    ZIP_COMPRESSION_DEFLATE: zipfile.ZIP_DEFLATED,
    ZIP_COMPRESSION_STORE: zipfile.ZIP_STORED,
}

# Unix host, regular file with 0644 permissions
_ZIP_CREATE_SYSTEM = 3
_ZIP_FILE_ATTRIBUTES = 0o100644 << 16


@dataclass
class ArchiveEntry:
    """A single member of a zip archive.

    `binary` says how `data` is turned into bytes: binary strings are written
    byte-for-byte (latin-1), text is UTF-8 encoded. When unset it is inferred
    from the type of `data`.
    """
    path: str
    data: Union[str, bytes]
    binary: Optional[bool] = None

    def to_bytes(self) -> bytes:
        if isinstance(self.data, bytes):
            return self.data
        binary = self.binary if self.binary is not None else False
        return self.data.encode("latin-1" if binary else "utf-8")


def build_zip_archive(
    entries: Iterable[ArchiveEntry],
    compression: str = DEFAULT_ZIP_COMPRESSION,
) -> bytes:
    """Assemble a zip archive in memory.

    Args:
        entries: Members to write, in order.
        compression: "DEFLATE" (default) or "STORE".

    Returns:
        The complete archive bytes.

    Raises:
        ValueError: If the compression name is unknown.
        ArchiveWriteError: If the archive cannot be written.
    """
    method = _ZIP_METHODS.get(compression.upper())
    if method is None:
        raise ValueError(
            f"Unknown zip compression '{compression}', expected one of {', '.join(_ZIP_METHODS)}"
        )

    buffer = io.BytesIO()
    try:
        with zipfile.ZipFile(buffer, "w", compression=method) as archive:
            for entry in entries:
                info = zipfile.ZipInfo(entry.path, date_time=ZIP_FIXED_TIMESTAMP)
                info.compress_type = method
                info.create_system = _ZIP_CREATE_SYSTEM
                info.external_attr = _ZIP_FILE_ATTRIBUTES
                archive.writestr(info, entry.to_bytes())
    except (zipfile.BadZipFile, zlib.error, OSError, ValueError) as e:
        logger.error(f"Failed to build zip archive: {e}")
        raise ArchiveWriteError("zip", str(e)) from e

    return buffer.getvalue()


def gzip_bytes(data: bytes, level: int = GZIP_LEVEL) -> bytes:
    """Gzip `data` with a zeroed modification time.

    Raises:
        ArchiveWriteError: If compression fails.
    """
    try:
        return gzip.compress(data, compresslevel=level, mtime=0)
    except (zlib.error, OSError, ValueError) as e:
        logger.error(f"Failed to gzip {len(data)} bytes: {e}")
        raise ArchiveWriteError("gzip", str(e)) from e
