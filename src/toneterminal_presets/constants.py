"""
Constants and configuration values for toneterminal_presets.
"""

from typing import Final, Tuple

# Application metadata
APP_VERSION: Final[str] = "0.3.0"
CREATOR: Final[str] = "ToneTerminal"

# Filenames
DEFAULT_FILENAME_FALLBACK: Final[str] = "tone-terminal"
STUB_FILENAME_FALLBACK: Final[str] = "tone"
STUB_FILENAME_SUFFIX: Final[str] = "_chain_stub.zip"

# Archive configuration
ZIP_COMPRESSION_DEFLATE: Final[str] = "DEFLATE"
ZIP_COMPRESSION_STORE: Final[str] = "STORE"
DEFAULT_ZIP_COMPRESSION: Final[str] = ZIP_COMPRESSION_DEFLATE
# Earliest timestamp the zip format can represent; pinned for reproducible archives
ZIP_FIXED_TIMESTAMP: Final[Tuple[int, int, int, int, int, int]] = (1980, 1, 1, 0, 0, 0)
GZIP_LEVEL: Final[int] = 9

# MIME types
MIME_OCTET_STREAM: Final[str] = "application/octet-stream"
MIME_GZIP: Final[str] = "application/gzip"
MIME_ZIP: Final[str] = "application/zip"
MIME_XML: Final[str] = "application/xml"

# Format versions
FST_VERSION: Final[str] = "1"
ABLETON_MAJOR_VERSION: Final[str] = "11"
ABLETON_MINOR_VERSION: Final[str] = "0"
PRO_TOOLS_PRESET_VERSION: Final[str] = "1.0"
LOGIC_PATCH_VERSION: Final[str] = "1.0"

# Parameter placeholder written when a plugin carries neither parameters nor settings
PLACEHOLDER_PARAMETER: Final[Tuple[str, str]] = ("Default", "0")

# Logging configuration
LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# CLI configuration
DEFAULT_OUTPUT_FORMAT: Final[str] = "table"
SUPPORTED_OUTPUT_FORMATS: Final[list[str]] = ["table", "json", "yaml"]
CHAIN_FILE_SUFFIXES: Final[list[str]] = [".json", ".yaml", ".yml"]
