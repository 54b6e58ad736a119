"""
Shared pytest configuration for the note manager test suite.

This file centralizes reusable fixtures so that:
    • Command tests drive a scripted console instead of a real terminal
    • Stores get deterministic, strictly increasing timestamps
    • Every test writes its auto-save/export files under tmp_path

The doubles themselves live in tests/doubles.py.
"""

import pytest
from typer.testing import CliRunner

from notemgr.dispatcher import build_dispatcher
from notemgr.session import Session
from notemgr.store import NoteStore
from tests.doubles import ScriptedConsole, StepClock


# ============================================================================
# 1.1 — SHARED TEST INFRASTRUCTURE
# ============================================================================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def autosave_path(tmp_path):
    """Auto-save file location inside the test's temp directory."""
    return tmp_path / "notemgr.json"


# ============================================================================
# 1.2 — DETERMINISTIC DOUBLES + STORE FIXTURES
# ============================================================================


@pytest.fixture
def console() -> ScriptedConsole:
    return ScriptedConsole()


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


# ---------------------------------------------------------------------------
# Fixture: store
# ---------------------------------------------------------------------------
@pytest.fixture
def store(autosave_path, clock) -> NoteStore:
    """An empty store whose auto-save file lives under tmp_path."""
    return NoteStore(autosave_path, autoload=False, clock=clock)


@pytest.fixture
def session(store, console) -> Session:
    return Session(store, console)


@pytest.fixture
def dispatcher(session):
    """The standard dispatcher, wired to the session's shutdown routine."""
    return session.dispatcher


@pytest.fixture
def make_dispatcher(store):
    """Build a dispatcher for an arbitrary console (e.g. one with scripted answers)."""

    def _factory(console, shutdown=None):
        return build_dispatcher(store, console, shutdown or (lambda: None))

    return _factory
