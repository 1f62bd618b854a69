"""
KeyCap 配置文件 — 版本化二进制 (.kfg) / JSON (.json) 编解码
"""

from .core.config_file_manager import ConfigFileManager
from .core.container import ConfigContainer, FILE_DATA_PREFIX, DATA_FORMAT_VERSION, check_header
from .core.errors import (
    ErrorKind, ConfigFileError, ConfigIOError, UnsupportedFormatError, UnsupportedVersionError,
    MalformedDocumentError, ImportFailedError, EntryDecodeError,
)
from .core.remap_entry import RemapEntry, RemapEntryCodec, KeyDefinition, KeyFlag
from .io.file_group import FileGroup, ValidExtension

__all__ = [
    "ConfigFileManager",
    "ConfigContainer", "FILE_DATA_PREFIX", "DATA_FORMAT_VERSION", "check_header",
    "ErrorKind", "ConfigFileError", "ConfigIOError", "UnsupportedFormatError", "UnsupportedVersionError",
    "MalformedDocumentError", "ImportFailedError", "EntryDecodeError",
    "RemapEntry", "RemapEntryCodec", "KeyDefinition", "KeyFlag",
    "FileGroup", "ValidExtension",
]
