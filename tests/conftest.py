"""Pytest configuration for test isolation.

The ``recycling_machine`` package lives under ``packages/``; make it importable
when the project is not installed. Logging configured by one test (e.g., a CLI
invocation binding a handler to a captured stream) is torn down afterwards so
later tests start from the library default. ``RCM_*`` settings are cleared so a
developer's ``.env`` or shell cannot leak into assertions.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parents[1]
_PKG_DIR = _ROOT / "packages"
sys.path[:0] = [p for p in [str(_PKG_DIR)] if p not in sys.path]

from recycling_machine import Ledger  # noqa: E402
from recycling_machine import logging_setup  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("RCM_MACHINE_ID", "RCM_LOCATION", "RCM_CATALOG_PATH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv(logging_setup.LOG_LEVEL_ENV, raising=False)
    # The CLI loads ./.env; run from an empty directory.
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logging_setup.reset_logging()


@pytest.fixture
def ledger() -> Ledger:
    return Ledger("RCM-7", "Library")
