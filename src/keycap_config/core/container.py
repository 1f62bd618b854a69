"""
配置容器 — 文件前缀 + 格式版本 + 有序记录列表, 与编码方式无关
"""

import struct
from dataclasses import dataclass, field
from typing import BinaryIO

from .errors import UnsupportedFormatError, UnsupportedVersionError
from ..io.stream_util import INT_FORMAT


FILE_DATA_PREFIX = 0x0E0CA000
DATA_FORMAT_VERSION = 0x1

# JSON 字段名 (磁盘格式, 不可更改)
KEY_PREFIX = "FileDataPrefix"
KEY_VERSION = "DataFormatVersion"
KEY_ENTRIES = "RemapEntries"


@dataclass
class ConfigContainer:
    entries: list = field(default_factory=list)

    @property
    def file_data_prefix(self) -> int:
        return FILE_DATA_PREFIX

    @property
    def data_format_version(self) -> int:
        return DATA_FORMAT_VERSION

    def header_bytes(self) -> bytes:
        return struct.pack(INT_FORMAT, self.file_data_prefix) + struct.pack(INT_FORMAT, self.data_format_version)

    def write_binary(self, stream: BinaryIO):
        """写入文件头, 然后逐条写入记录 (无分隔符)"""
        stream.write(self.header_bytes())
        for entry in self.entries:
            stream.write(entry.to_bytes())

    def to_dict(self) -> dict:
        return {
            KEY_PREFIX: self.file_data_prefix,
            KEY_VERSION: self.data_format_version,
            KEY_ENTRIES: [e.to_dict() for e in self.entries],
        }


def check_file_prefix(file_name: str, prefix):
    if prefix != FILE_DATA_PREFIX:
        raise UnsupportedFormatError(
            file_name,
            f"{file_name} does not have the correct data prefix. This is likely an unsupported format.",
        )


def check_file_version(file_name: str, version):
    if version != DATA_FORMAT_VERSION:
        raise UnsupportedVersionError(
            file_name,
            f"{file_name} indicates an unsupported data format version.",
        )


def check_header(file_name: str, prefix, version):
    """二进制与 JSON 共用的文件头校验, 先前缀后版本"""
    check_file_prefix(file_name, prefix)
    check_file_version(file_name, version)
