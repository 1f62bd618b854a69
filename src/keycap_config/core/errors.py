"""
配置文件错误类型 — 每种加载/保存失败对应一个 kind
"""

from enum import Enum


class ErrorKind(Enum):
    IO_ERROR            = "io_error"             # 打开/读/写失败
    UNSUPPORTED_FORMAT  = "unsupported_format"   # 前缀不匹配
    UNSUPPORTED_VERSION = "unsupported_version"  # 版本不匹配, 不做迁移
    MALFORMED_DOCUMENT  = "malformed_document"   # JSON 无法解析
    IMPORT_FAILED       = "import_failed"        # JSON 解析为空
    ENTRY_DECODE        = "entry_decode"         # 单条记录解码失败


class ConfigFileError(Exception):
    """所有配置文件错误的基类, 消息中总是带文件名"""

    kind: ErrorKind

    def __init__(self, file_name: str, message: str):
        super().__init__(message)
        self.file_name = file_name


class ConfigIOError(ConfigFileError):
    kind = ErrorKind.IO_ERROR


class UnsupportedFormatError(ConfigFileError):
    kind = ErrorKind.UNSUPPORTED_FORMAT


class UnsupportedVersionError(ConfigFileError):
    kind = ErrorKind.UNSUPPORTED_VERSION


class MalformedDocumentError(ConfigFileError):
    kind = ErrorKind.MALFORMED_DOCUMENT


class ImportFailedError(ConfigFileError):
    kind = ErrorKind.IMPORT_FAILED


class EntryDecodeError(ConfigFileError):
    kind = ErrorKind.ENTRY_DECODE
