"""
定长整数读写 — 所有磁盘整数统一为 4 字节小端无符号
"""

import struct
from typing import BinaryIO

INT_FORMAT = "<I"
INT_SIZE = struct.calcsize(INT_FORMAT)


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """读取恰好 size 字节, 不足时抛 EOFError"""
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def read_int(stream: BinaryIO) -> int:
    return struct.unpack(INT_FORMAT, read_exact(stream, INT_SIZE))[0]


def write_int(stream: BinaryIO, value: int):
    stream.write(struct.pack(INT_FORMAT, value))


def stream_length(stream: BinaryIO) -> int:
    """返回流总长度, 保持当前位置不变"""
    pos = stream.tell()
    length = stream.seek(0, 2)
    stream.seek(pos)
    return length
