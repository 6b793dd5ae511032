"""
Pytest configuration and fixtures for smtbridge tests.
"""
import sys
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from smtbridge.solver import QueryResult  # noqa: E402


class ScriptedCallback:
    """Query callback replaying canned replies per backend identifier."""

    def __init__(self, replies):
        self.replies = replies
        self.calls = []

    def __call__(self, label, query):
        self.calls.append((label, query))
        solver = label.split(" ", 1)[1]
        reply = self.replies.get(solver)
        if reply is None:
            return QueryResult(False, f"{solver} unavailable")
        return reply


@pytest.fixture
def scripted():
    """Factory for ScriptedCallback instances."""
    return ScriptedCallback
