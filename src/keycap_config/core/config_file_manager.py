"""
配置文件管理 — 版本化二进制 (.kfg) 与 JSON (.json) 的保存和加载

二进制布局 (小端):
  [FileDataPrefix:4][DataFormatVersion:4][Entry]...[Entry]   读到文件末尾为止
"""

import json
import logging
from contextlib import contextmanager
from typing import BinaryIO, Optional

from .container import (
    ConfigContainer, KEY_PREFIX, KEY_VERSION, KEY_ENTRIES, check_header,
)
from .errors import (
    ConfigFileError, ConfigIOError, EntryDecodeError,
    ImportFailedError, MalformedDocumentError, UnsupportedFormatError,
)
from .remap_entry import RemapEntry, RemapEntryCodec
from ..io.file_group import FileGroup, ValidExtension
from ..io.stream_util import read_int, stream_length


logger = logging.getLogger(__name__)

@contextmanager
def _file_errors(file_name: str, action: str):
    """OSError 转为 ConfigIOError; 所有拒绝都记一条 warning"""
    try:
        yield
    except OSError as e:
        logger.warning("%s %s failed: %s", action, file_name, e)
        raise ConfigIOError(file_name, f"{file_name} could not be {action}: {e.strerror or e}") from e
    except ConfigFileError as e:
        logger.warning("%s %s rejected (%s): %s", action, file_name, e.kind.value, e)
        raise


def _try_read_int(stream: BinaryIO) -> Optional[int]:
    try:
        return read_int(stream)
    except EOFError:
        return None


class ConfigFileManager:
    """重映射记录的保存和加载"""

    def __init__(self, entry_type=RemapEntry):
        if not isinstance(entry_type, RemapEntryCodec):
            raise TypeError(f"{entry_type!r} does not provide to_bytes/from_stream/to_dict/from_dict")
        self.entry_type = entry_type

    # ==============================
    # 二进制 (.kfg)
    # ==============================

    def save_binary(self, entries: list, file_group: FileGroup):
        file_name = file_group.get_filename_with_extension(ValidExtension.KFG)
        with _file_errors(file_name, "written"):
            with open(file_name, "wb") as f:
                ConfigContainer(list(entries)).write_binary(f)
        logger.debug("saved %d entries to %s", len(entries), file_name)

    def load_binary(self, file_group: FileGroup) -> list:
        file_name = file_group.get_filename_with_extension(ValidExtension.KFG)
        with _file_errors(file_name, "read"):
            with open(file_name, "rb") as f:
                container = self._read_container(f, file_name)
        logger.debug("loaded %d entries from %s", len(container.entries), file_name)
        return container.entries

    def _read_container(self, stream: BinaryIO, file_name: str) -> ConfigContainer:
        length = stream_length(stream)
        prefix = _try_read_int(stream)
        version = _try_read_int(stream)
        check_header(file_name, prefix, version)

        entries = []
        while stream.tell() < length:
            start = stream.tell()
            try:
                entry = self.entry_type.from_stream(stream)
            except (ConfigFileError, OSError):
                raise
            except Exception as e:
                raise EntryDecodeError(
                    file_name, f"{file_name} entry {len(entries)} at offset {start} could not be decoded: {e!r}"
                ) from e
            end = stream.tell()
            if end > length:
                raise EntryDecodeError(
                    file_name, f"{file_name} entry {len(entries)} at offset {start} reads past end of file"
                )
            if end == start:
                raise EntryDecodeError(
                    file_name, f"{file_name} entry {len(entries)} at offset {start} consumed no data"
                )
            entries.append(entry)
        return ConfigContainer(entries)

    # ==============================
    # JSON (.json)
    # ==============================

    def save_json(self, entries: list, file_group: FileGroup):
        file_name = file_group.get_filename_with_extension(ValidExtension.JSON)
        text = json.dumps(ConfigContainer(list(entries)).to_dict(), ensure_ascii=False, indent=2)
        with _file_errors(file_name, "written"):
            with open(file_name, "w", encoding="utf-8") as f:
                f.write(text)
        logger.debug("saved %d entries to %s", len(entries), file_name)

    def load_json(self, file_group: FileGroup) -> list:
        file_name = file_group.get_filename_with_extension(ValidExtension.JSON)
        with _file_errors(file_name, "read"):
            with open(file_name, "r", encoding="utf-8") as f:
                try:
                    text = f.read()
                except UnicodeDecodeError as e:
                    raise MalformedDocumentError(file_name, f"{file_name} is not a text document: {e}") from e
            container = self._parse_document(text, file_name)
        logger.debug("loaded %d entries from %s", len(container.entries), file_name)
        return container.entries

    def _parse_document(self, text: str, file_name: str) -> ConfigContainer:
        if not text.strip():
            raise ImportFailedError(file_name, f"{file_name} import is not successful")
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise MalformedDocumentError(file_name, f"{file_name} is not a valid JSON document: {e}") from e
        if data is None:
            raise ImportFailedError(file_name, f"{file_name} import is not successful")
        if not isinstance(data, dict):
            raise MalformedDocumentError(file_name, f"{file_name} does not contain a JSON object")

        check_header(file_name, data.get(KEY_PREFIX), data.get(KEY_VERSION))

        raw_entries = data.get(KEY_ENTRIES)
        if not isinstance(raw_entries, list):
            raise MalformedDocumentError(file_name, f"{file_name} has no {KEY_ENTRIES} list")

        entries = []
        for i, raw in enumerate(raw_entries):
            try:
                entries.append(self.entry_type.from_dict(raw))
            except ConfigFileError:
                raise
            except Exception as e:
                raise EntryDecodeError(file_name, f"{file_name} entry {i} could not be decoded: {e!r}") from e
        return ConfigContainer(entries)

    # ==============================
    # 按扩展名分发
    # ==============================

    def save(self, entries: list, file_group: FileGroup, extension: ValidExtension):
        extension = ValidExtension(extension)
        if extension is ValidExtension.KFG:
            self.save_binary(entries, file_group)
        else:
            self.save_json(entries, file_group)
        file_group.extension = extension.value

    def load(self, file_group: FileGroup, extension: ValidExtension) -> list:
        extension = ValidExtension(extension)
        if extension is ValidExtension.KFG:
            entries = self.load_binary(file_group)
        else:
            entries = self.load_json(file_group)
        file_group.extension = extension.value
        return entries

    def save_all(self, entries: list, file_group: FileGroup):
        """同一份配置同时保存为 .kfg 和 .json"""
        for extension in ValidExtension:
            self.save(entries, file_group, extension)

    def load_path(self, path: str) -> list:
        """按路径扩展名选择编码, 不在两种编码之间回退"""
        extension = ValidExtension.from_path(path)
        if extension is None:
            logger.warning("load %s rejected: unknown extension", path)
            raise UnsupportedFormatError(path, f"{path} does not have a supported extension (.kfg or .json)")
        return self.load(FileGroup(path), extension)
