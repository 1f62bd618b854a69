"""
按键重映射记录

二进制格式 (小端, 无外部长度前缀, 记录自描述):
  [InputFlags:4][InputValue:4][OutputCount:4]([OutputFlags:4][OutputValue:4]) * OutputCount
JSON 格式:
  {"InputDefinition": {"Flags", "Value"}, "OutputDefinitions": [{"Flags", "Value"}, ...]}
"""

import struct
from dataclasses import dataclass, field
from enum import IntFlag
from typing import BinaryIO, Protocol, runtime_checkable

from ..io.stream_util import read_exact, read_int


MAX_OUTPUTS = 255
MAX_U32 = 0xFFFFFFFF

_KEY_DEF_FORMAT = "<II"
_KEY_DEF_SIZE = struct.calcsize(_KEY_DEF_FORMAT)


@runtime_checkable
class RemapEntryCodec(Protocol):
    """配置文件编解码器对记录类型的全部要求"""

    def to_bytes(self) -> bytes: ...

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> "RemapEntryCodec": ...

    def to_dict(self) -> dict: ...

    @classmethod
    def from_dict(cls, d: dict) -> "RemapEntryCodec": ...


class KeyFlag(IntFlag):
    NONE       = 0
    SHIFT      = 1 << 0
    CONTROL    = 1 << 1
    ALT        = 1 << 2
    DO_NOTHING = 1 << 3  # 吞掉按键, 不输出
    TOGGLE     = 1 << 4  # 按一次按下, 再按一次释放
    DELAY      = 1 << 5  # value 为毫秒延迟
    MOUSE_OUT  = 1 << 6  # value 为鼠标按键
    DOWN       = 1 << 7  # 仅发送按下
    UP         = 1 << 8  # 仅发送释放


_FLAG_LABELS = [
    (KeyFlag.SHIFT, "Shift"),
    (KeyFlag.CONTROL, "Ctrl"),
    (KeyFlag.ALT, "Alt"),
    (KeyFlag.TOGGLE, "Toggle"),
    (KeyFlag.DOWN, "Down"),
    (KeyFlag.UP, "Up"),
]


def _check_u32(name: str, value: int):
    if not 0 <= value <= MAX_U32:
        raise ValueError(f"{name} out of range: {value}")


@dataclass
class KeyDefinition:
    """单个按键: 虚拟键码 + 标志位"""
    flags: KeyFlag = KeyFlag.NONE
    value: int = 0

    def __post_init__(self):
        _check_u32("flags", int(self.flags))
        _check_u32("value", self.value)
        self.flags = KeyFlag(self.flags)

    @property
    def label(self) -> str:
        if self.flags & KeyFlag.DO_NOTHING:
            return "Nothing"
        if self.flags & KeyFlag.DELAY:
            return f"Delay {self.value}ms"
        parts = [name for flag, name in _FLAG_LABELS if self.flags & flag]
        if self.flags & KeyFlag.MOUSE_OUT:
            parts.append(f"Mouse {self.value}")
        else:
            parts.append(f"0x{self.value:02X}")
        return "+".join(parts)

    def to_bytes(self) -> bytes:
        return struct.pack(_KEY_DEF_FORMAT, int(self.flags), self.value)

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> "KeyDefinition":
        flags, value = struct.unpack(_KEY_DEF_FORMAT, read_exact(stream, _KEY_DEF_SIZE))
        return cls(flags=KeyFlag(flags), value=value)

    def to_dict(self) -> dict:
        return {
            "Flags": int(self.flags),
            "Value": self.value,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "KeyDefinition":
        return cls(
            flags=int(d.get("Flags", 0)),
            value=int(d["Value"]),
        )


@dataclass
class RemapEntry:
    """一条重映射: 输入键 -> 有序输出序列"""
    input: KeyDefinition
    outputs: list[KeyDefinition] = field(default_factory=list)

    def __post_init__(self):
        if not 1 <= len(self.outputs) <= MAX_OUTPUTS:
            raise ValueError(f"output count must be 1..{MAX_OUTPUTS}, got {len(self.outputs)}")

    @property
    def description(self) -> str:
        return f"{self.input.label} -> {', '.join(o.label for o in self.outputs)}"

    def to_bytes(self) -> bytes:
        parts = [self.input.to_bytes(), struct.pack("<I", len(self.outputs))]
        parts.extend(o.to_bytes() for o in self.outputs)
        return b"".join(parts)

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> "RemapEntry":
        """从流中读取一条记录, 恰好前进一条记录的长度"""
        key_input = KeyDefinition.from_stream(stream)
        count = read_int(stream)
        if not 1 <= count <= MAX_OUTPUTS:
            raise ValueError(f"output count must be 1..{MAX_OUTPUTS}, got {count}")
        outputs = [KeyDefinition.from_stream(stream) for _ in range(count)]
        return cls(input=key_input, outputs=outputs)

    def to_dict(self) -> dict:
        return {
            "InputDefinition": self.input.to_dict(),
            "OutputDefinitions": [o.to_dict() for o in self.outputs],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "RemapEntry":
        return cls(
            input=KeyDefinition.from_dict(d["InputDefinition"]),
            outputs=[KeyDefinition.from_dict(o) for o in d["OutputDefinitions"]],
        )
