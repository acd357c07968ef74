"""Pytest configuration and fixtures for montepi tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class ScriptedSource:
    """Random source double that replays fixed values in order."""

    def __init__(self, symmetric=None, uniform=None, bools=None, units=None):
        self.seed = None
        self._symmetric = list(symmetric or [])
        self._uniform = list(uniform or [])
        self._bools = list(bools or [])
        self._units = list(units or [])
        self.calls = 0

    def _pop(self, values, kind):
        self.calls += 1
        if not values:
            raise AssertionError(f"ScriptedSource ran out of {kind} values")
        return values.pop(0)

    def next_unit(self):
        return self._pop(self._units, "unit")

    def next_symmetric(self):
        return self._pop(self._symmetric, "symmetric")

    def next_uniform(self, low, high):
        return self._pop(self._uniform, "uniform")

    def next_bool(self):
        return self._pop(self._bools, "bool")


@pytest.fixture(autouse=True)
def reset_state():
    """Reset receipt counter and ledger before each test."""
    from montepi.core import reset_receipt_counter, set_ledger_path

    reset_receipt_counter()
    set_ledger_path(None)

    yield

    set_ledger_path(None)


@pytest.fixture
def seeded_source():
    """Random source with a fixed seed."""
    from montepi.random_source import RandomSource
    return RandomSource(42)


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedSource


@pytest.fixture
def ledger(tmp_path):
    """Enable a temporary ledger and return its path."""
    from montepi.core import set_ledger_path

    path = tmp_path / "receipts.jsonl"
    set_ledger_path(path)
    return path
