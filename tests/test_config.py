"""
Unit tests for auto-save path and verbose flag resolution.
"""

from pathlib import Path

from notemgr import config


def test_default_autosave_path_uses_program_base_name() -> None:
    assert config.default_autosave_path("/usr/local/bin/notes") == Path("notes.json")
    assert config.default_autosave_path("C:/tools/NoteManager.exe") == Path("NoteManager.json")


def test_default_autosave_path_falls_back_when_name_is_empty() -> None:
    assert config.default_autosave_path("") == Path("notemgr.json")


def test_resolve_prefers_explicit_then_env(monkeypatch) -> None:
    monkeypatch.setenv(config.AUTOSAVE_PATH_ENV, "from-env.json")

    assert config.resolve_autosave_path("explicit.json") == Path("explicit.json")
    assert config.resolve_autosave_path() == Path("from-env.json")

    monkeypatch.delenv(config.AUTOSAVE_PATH_ENV)
    monkeypatch.setattr(config.sys, "argv", ["/opt/app/mynotes"])

    assert config.resolve_autosave_path() == Path("mynotes.json")


def test_verbose_from_env(monkeypatch) -> None:
    monkeypatch.setenv(config.VERBOSE_ENV, "Yes")
    assert config.verbose_from_env() is True

    monkeypatch.setenv(config.VERBOSE_ENV, "0")
    assert config.verbose_from_env() is False


def test_default_autosave_path_under_python_dash_m() -> None:
    """`python -m notemgr` reports argv[0] as .../notemgr/__main__.py."""
    assert config.default_autosave_path("/site-packages/notemgr/__main__.py") == Path("notemgr.json")
