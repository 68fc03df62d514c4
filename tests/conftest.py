"""
Pytest configuration and shared fixtures for tests
"""

import io

import pytest
from rich.console import Console

from cli.app import Application
from cli.messages import Messages
from cli.prompts import Prompter
from core.domain.language import Language


class RecordingReporter:
    """Reporter double that keeps every message by kind"""

    def __init__(self):
        self.successes = []
        self.errors = []
        self.infos = []

    def success(self, message):
        self.successes.append(message)

    def error(self, message):
        self.errors.append(message)

    def info(self, message):
        self.infos.append(message)


def script(*lines):
    """Input stream with one line per answer"""
    return io.StringIO("".join(f"{line}\n" for line in lines))


@pytest.fixture(name="console")
def console_fixture():
    """Console writing plain text into memory"""
    return Console(file=io.StringIO(), width=120, highlight=False, no_color=True)


@pytest.fixture(name="output")
def output_fixture(console):
    """Everything printed to the console so far"""
    return lambda: console.file.getvalue()


@pytest.fixture(name="reporter")
def reporter_fixture():
    return RecordingReporter()


@pytest.fixture(name="messages")
def messages_fixture():
    return Messages(Language.ENGLISH)


@pytest.fixture(name="make_prompter")
def make_prompter_fixture(console, reporter, messages):
    """Build a Prompter that answers from the given lines"""

    def _make(*lines, today=None):
        kwargs = {"today": today} if today is not None else {}
        return Prompter(console, reporter, messages, stream=script(*lines), **kwargs)

    return _make


@pytest.fixture(name="make_app")
def make_app_fixture(console, reporter, messages):
    """Build an Application driven by the given lines (not yet running)"""

    def _make(*lines):
        return Application(
            console=console,
            reporter=reporter,
            messages=messages,
            stream=script(*lines),
        )

    return _make


@pytest.fixture(name="run_app")
def run_app_fixture(make_app):
    """Run a whole session over the given lines and return the Application"""

    def _run(*lines):
        app = make_app(*lines)
        app.run()
        return app

    return _run
