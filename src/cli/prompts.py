"""Validated line input for the menus.

Every `ask_*` method prints its prompt once and keeps reading lines until the
answer is valid, reporting each rejection through the `Reporter`. There is no
cancel path: only end of input (`EOFError`) leaves a loop early.
"""

from __future__ import annotations

import re
from datetime import date, time
from typing import Callable, TextIO

from rich.console import Console

from cli.messages import Messages
from core.interfaces.reporter import Reporter

DATE_PATTERN = re.compile(r"^[0-9]{2}\.[0-9]{2}$")
TIME_PATTERN = re.compile(r"^[0-9]{2}:[0-9]{2}$")
_INT_PATTERN = re.compile(r"^[+-]?[0-9]+$")


def parse_int(text: str | None) -> int | None:
    """ASCII integer with optional sign and surrounding whitespace, else None."""

    if text is None:
        return None
    value = text.strip()
    if not _INT_PATTERN.match(value):
        return None
    try:
        return int(value)
    except ValueError:
        # longer than the interpreter allows for str -> int
        return None


def parse_bool(text: str | None) -> bool | None:
    value = (text or "").strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    return None


class Prompter:
    """Reads operator answers from the console (or a scripted stream)."""

    def __init__(
        self,
        console: Console,
        reporter: Reporter,
        messages: Messages,
        *,
        stream: TextIO | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.console = console
        self.reporter = reporter
        self.t = messages
        self._stream = stream
        self._today = today

    def read(self, prompt: str = "") -> str:
        """One raw line, without the trailing newline."""

        if self._stream is None:
            return self.console.input(prompt, markup=False)
        line = self.console.input(prompt, markup=False, stream=self._stream)
        if not line:
            raise EOFError("input stream exhausted")
        return line.rstrip("\r\n")

    def read_choice(self, prompt: str) -> int | None:
        return parse_int(self.read(prompt))

    def ask_int(
        self,
        prompt: str,
        field: str,
        *,
        minimum: int = 1,
        maximum: int | None = None,
    ) -> int:
        if maximum is None:
            retry = self.t("input.positive_int", field=field)
        else:
            retry = self.t("input.int_range", field=field, minimum=minimum, maximum=maximum)

        answer = self.read(prompt)
        while True:
            value = parse_int(answer)
            if value is not None and value >= minimum and (maximum is None or value <= maximum):
                return value
            self.reporter.error(retry)
            answer = self.read()

    def ask_non_empty(self, prompt: str, field: str) -> str:
        answer = self.read(prompt)
        while not answer.strip():
            self.reporter.error(self.t("input.empty", field=field))
            answer = self.read()
        return answer.strip()

    def ask_optional(self, prompt: str) -> str | None:
        """Blank answer means "keep the current value" and yields None."""

        answer = self.read(prompt).strip()
        return answer or None

    def ask_bool(self, prompt: str) -> bool:
        answer = self.read(prompt)
        while True:
            value = parse_bool(answer)
            if value is not None:
                return value
            self.reporter.error(self.t("input.bool"))
            answer = self.read()

    def ask_date(self, prompt: str) -> date:
        """`dd.mm` in the current year."""

        answer = self.read(prompt)
        while True:
            if not DATE_PATTERN.match(answer):
                self.reporter.error(self.t("input.date_format"))
            else:
                day, month = (int(part) for part in answer.split("."))
                try:
                    return date(self._today().year, month, day)
                except ValueError:
                    self.reporter.error(self.t("input.date_invalid"))
            answer = self.read()

    def ask_time(self, prompt: str) -> time:
        """`hh:mm`, 24-hour clock."""

        answer = self.read(prompt)
        while True:
            if not TIME_PATTERN.match(answer):
                self.reporter.error(self.t("input.time_format"))
            else:
                hours, minutes = (int(part) for part in answer.split(":"))
                if 0 <= hours <= 23 and 0 <= minutes <= 59:
                    return time(hours, minutes)
                self.reporter.error(self.t("input.time_invalid"))
            answer = self.read()
