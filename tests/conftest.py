import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mapgen.diagnostics import DiagnosticLog  # noqa: E402


class ScriptedRng:
    """Random source replaying a fixed list of integers through randrange()."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, start, stop):
        assert self.values, f"ScriptedRng exhausted (call {len(self.calls) + 1}, range [{start}, {stop}))"
        v = self.values.pop(0)
        assert start <= v < stop, f"Scripted value {v} outside [{start}, {stop})"
        self.calls.append((start, stop, v))
        return v


@pytest.fixture()
def scripted():
    return ScriptedRng


@pytest.fixture()
def diags():
    return DiagnosticLog()
