"""
Unit tests for the command dispatcher.

These tests verify:
    - quote-aware tokenization,
    - case-insensitive command lookup,
    - reporting of unknown commands,
    - registration order (as shown by `help`).
"""

import pytest

from notemgr.dispatcher import CommandDispatcher, tokenize


# =====================================================================
# Tokenizer
# =====================================================================


def test_tokenize_keeps_quoted_text_together() -> None:
    assert tokenize('add "hello world" "line1 line2"') == ["add", "hello world", "line1 line2"]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("", []),
        ("    ", []),
        ("list", ["list"]),
        ("  delete    3  ", ["delete", "3"]),
        ('search "unterminated quote here', ["search", "unterminated quote here"]),
        ('add ti"tle with"out', ["add", "title without"]),
        ('add "" ""', ["add"]),
        ("add a\tb", ["add", "a\tb"]),
    ],
)
def test_tokenize_edge_cases(line, expected) -> None:
    """
    Quote characters never appear in tokens, empty tokens are dropped,
    and only the space character separates tokens.
    """
    assert tokenize(line) == expected


# =====================================================================
# Dispatch
# =====================================================================


class RecordingCommand:
    """Minimal command that records the args it receives."""

    def __init__(self, name: str, description: str = "records calls") -> None:
        self.name = name
        self.description = description
        self.calls = []

    def execute(self, args=None) -> None:
        self.calls.append(args)


def test_dispatch_passes_remaining_tokens_or_none(console) -> None:
    dispatcher = CommandDispatcher(console)
    cmd = RecordingCommand("add")
    dispatcher.register(cmd)

    assert dispatcher.dispatch('add "a b" c') is True
    assert dispatcher.dispatch("add") is True

    assert cmd.calls == [["a b", "c"], None]


def test_dispatch_command_name_is_case_insensitive(console) -> None:
    dispatcher = CommandDispatcher(console)
    cmd = RecordingCommand("list")
    dispatcher.register(cmd)

    dispatcher.dispatch("LiSt")

    assert cmd.calls == [None]


def test_dispatch_blank_line_is_a_no_op(console) -> None:
    dispatcher = CommandDispatcher(console)

    assert dispatcher.dispatch("   ") is False
    assert console.lines == []


def test_dispatch_unknown_command_is_reported(console) -> None:
    dispatcher = CommandDispatcher(console)

    assert dispatcher.dispatch("Frobnicate now") is False
    assert console.lines == ["Unknown command: frobnicate. Type 'help' for available commands."]


def test_register_replaces_same_name_in_place(console) -> None:
    dispatcher = CommandDispatcher(console)
    first = RecordingCommand("add")
    dispatcher.register(first)
    dispatcher.register(RecordingCommand("list"))
    second = RecordingCommand("add", "replacement")
    dispatcher.register(second)

    assert [c.name for c in dispatcher.commands()] == ["add", "list"]
    assert dispatcher.get("ADD") is second


def test_help_lists_standard_commands_in_registration_order(dispatcher, console) -> None:
    dispatcher.dispatch("help")

    assert console.lines[0] == "Available commands:"
    names = [line.split(" - ")[0].strip() for line in console.lines[1:]]
    assert names == ["add", "list", "delete", "exit", "help", "search", "update", "export", "import"]
    assert "  help - Show available commands" in console.lines
