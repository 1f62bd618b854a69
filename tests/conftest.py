from __future__ import annotations

from pathlib import Path
import sys

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from keycap_config import ConfigFileManager, FileGroup, KeyDefinition, KeyFlag, RemapEntry


@pytest.fixture()
def entries() -> list[RemapEntry]:
    return [
        RemapEntry(
            input=KeyDefinition(KeyFlag.CONTROL, 0x43),
            outputs=[KeyDefinition(KeyFlag.NONE, 0x44)],
        ),
        RemapEntry(
            input=KeyDefinition(KeyFlag.SHIFT | KeyFlag.ALT, 0x70),
            outputs=[
                KeyDefinition(KeyFlag.CONTROL, 0x41),
                KeyDefinition(KeyFlag.DELAY, 250),
                KeyDefinition(KeyFlag.CONTROL, 0x43),
            ],
        ),
        RemapEntry(
            input=KeyDefinition(KeyFlag.NONE, 0x14),
            outputs=[KeyDefinition(KeyFlag.DO_NOTHING, 0)],
        ),
    ]


@pytest.fixture()
def file_group(tmp_path: Path) -> FileGroup:
    return FileGroup(str(tmp_path / "layout.kfg"))


@pytest.fixture()
def manager() -> ConfigFileManager:
    return ConfigFileManager()
