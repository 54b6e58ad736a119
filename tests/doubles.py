"""
Test doubles for the note manager.

These classes stand in for the real terminal and the wall clock so that
command and session tests are deterministic and never touch stdin.
"""

from datetime import datetime, timedelta
from typing import List, Optional

import typer


class ScriptedConsole:
    """
    Console double that mirrors notemgr.console.Console.

    Exposes:
        • .lines   → every echoed line (multi-line messages are split)
        • .prompts → every prompt text shown, in order

    Answers are consumed in order by prompt() and read_line(). Running out
    of answers raises typer.Abort, exactly like closed stdin.
    """

    def __init__(self, answers: Optional[List[str]] = None) -> None:
        self.answers = list(answers or [])
        self.lines: List[str] = []
        self.prompts: List[str] = []

    def echo(self, message: str = "") -> None:
        self.lines.extend(str(message).split("\n"))

    def prompt(self, text: str) -> str:
        self.prompts.append(text)
        if not self.answers:
            raise typer.Abort()
        return self.answers.pop(0)

    def read_line(self, prompt: str) -> str:
        return self.prompt(prompt)


class StepClock:
    """Returns 2024-01-01 09:00, then one minute later on every call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 9, 0)) -> None:
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(minutes=1)
        return value
