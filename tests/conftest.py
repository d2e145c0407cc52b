"""Test configuration and global fixtures.

Puts the repository root on ``sys.path`` so ``algorithms`` imports without an
install, runs every test in automated mode (``safe_input`` never blocks) and
keeps logging on the console instead of ``outputs/logs``.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Force algorithm auto-discovery
import algorithms  # noqa: E402,F401

from wildcsp.domain.string_set import StringSet  # noqa: E402


@pytest.fixture(autouse=True)
def _automated_env(monkeypatch):
    monkeypatch.setenv("WILDCSP_AUTOMATED", "1")
    monkeypatch.setenv("LOG_TO_STDOUT", "true")
    for var in (
        "WILDCSP_SEED",
        "WILDCSP_WILDCARD_RATE",
        "WILDCSP_BENCHMARK_RUNS",
        "WILDCSP_BRUTE_FORCE_MAX_LENGTH",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def wildcard_set() -> StringSet:
    return StringSet(4, ["1*0*", "*100", "1101"])


@pytest.fixture
def binary_set() -> StringSet:
    return StringSet(3, ["010", "011", "110"])
