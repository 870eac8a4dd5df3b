from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

FILES_DIR = Path(__file__).resolve().parent / "_files"
# _files/picture.jpg is a generated stand-in for the upstream picture fixture, so its digest differs.
PICTURE_SHA1 = "cd13479d7038f7899ed8efd638343bf58ce5dd16"


@pytest.fixture(autouse=True)
def _configure_test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("COLUMNS", "200")


@pytest.fixture
def picture() -> Path:
    return FILES_DIR / "picture.jpg"


@pytest.fixture
def missing_file() -> Path:
    return FILES_DIR / "nofile.mo"


@pytest.fixture
def picture_sha1() -> str:
    return PICTURE_SHA1
