from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tests.fakes import FakeConfigReader, FakeRuntime, FakeStorage  # noqa: E402


@pytest.fixture()
def config_reader() -> FakeConfigReader:
    return FakeConfigReader()


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def runtime() -> FakeRuntime:
    return FakeRuntime()
