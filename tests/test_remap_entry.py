import io
import struct

import pytest

from keycap_config import KeyDefinition, KeyFlag, RemapEntry, RemapEntryCodec


def test_binary_layout():
    entry = RemapEntry(KeyDefinition(KeyFlag.SHIFT, 0x41), [KeyDefinition(KeyFlag.NONE, 0x42)])
    assert entry.to_bytes() == struct.pack("<IIIII", 1, 0x41, 1, 0, 0x42)


def test_from_stream_consumes_exactly_one_record(entries):
    buf = io.BytesIO(b"".join(e.to_bytes() for e in entries) + b"tail")
    decoded = [RemapEntry.from_stream(buf) for _ in entries]
    assert decoded == entries
    assert buf.read() == b"tail"


def test_dict_uses_stable_field_names():
    entry = RemapEntry(KeyDefinition(KeyFlag.CONTROL, 0x43), [KeyDefinition(KeyFlag.DELAY, 100)])
    assert entry.to_dict() == {
        "InputDefinition": {"Flags": 2, "Value": 0x43},
        "OutputDefinitions": [{"Flags": 32, "Value": 100}],
    }
    assert RemapEntry.from_dict(entry.to_dict()) == entry


def test_outputs_required():
    with pytest.raises(ValueError):
        RemapEntry(KeyDefinition(KeyFlag.NONE, 0x41), [])


def test_value_must_fit_u32():
    with pytest.raises(ValueError):
        KeyDefinition(KeyFlag.NONE, -1)
    with pytest.raises(ValueError):
        KeyDefinition(KeyFlag.NONE, 1 << 32)


@pytest.mark.parametrize("count", [0, 256, 0xFFFFFFFF])
def test_corrupt_output_count_rejected(count):
    raw = struct.pack("<III", 0, 0x41, count) + struct.pack("<II", 0, 0x42)
    with pytest.raises(ValueError):
        RemapEntry.from_stream(io.BytesIO(raw))


def test_short_record_raises_eof():
    raw = RemapEntry(KeyDefinition(KeyFlag.NONE, 0x41), [KeyDefinition(KeyFlag.NONE, 0x42)]).to_bytes()
    with pytest.raises(EOFError):
        RemapEntry.from_stream(io.BytesIO(raw[:-1]))


def test_labels():
    assert KeyDefinition(KeyFlag.SHIFT | KeyFlag.CONTROL, 0x41).label == "Shift+Ctrl+0x41"
    assert KeyDefinition(KeyFlag.DELAY, 250).label == "Delay 250ms"
    assert KeyDefinition(KeyFlag.DO_NOTHING, 0).label == "Nothing"
    assert KeyDefinition(KeyFlag.MOUSE_OUT | KeyFlag.ALT, 2).label == "Alt+Mouse 2"
    entry = RemapEntry(KeyDefinition(KeyFlag.NONE, 0x14), [KeyDefinition(KeyFlag.DO_NOTHING, 0)])
    assert entry.description == "0x14 -> Nothing"


def test_satisfies_codec_protocol():
    assert isinstance(RemapEntry, RemapEntryCodec)
    assert not isinstance(KeyFlag, RemapEntryCodec)
