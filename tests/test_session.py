"""Unit tests for the Rich console session (svcscaffold.session)."""

from __future__ import annotations

import io
from unittest.mock import patch

import pytest
from rich.console import Console

from svcscaffold.session import GREETING, CliSession

pytestmark = pytest.mark.unit


@pytest.fixture
def buffer_console() -> Console:
    return Console(file=io.StringIO(), width=100, force_terminal=False, color_system=None)


def _output(console: Console) -> str:
    return console.file.getvalue()


class TestCliSession:
    def test_defaults(self):
        session = CliSession()
        assert session.interactive is False
        assert isinstance(session.console, Console)

    def test_display_greeting(self, buffer_console):
        CliSession(interactive=True, console=buffer_console).display_greeting()
        out = _output(buffer_console)
        assert "Create a new service" in out
        assert GREETING.strip().splitlines()[0].strip() in out

    def test_log_writes_one_line(self, buffer_console):
        CliSession(console=buffer_console).log("Successfully created service")
        assert _output(buffer_console) == "Successfully created service\n"

    def test_log_does_not_interpret_paths_as_markup(self, buffer_console):
        CliSession(console=buffer_console).log("created in /tmp/[svc]")
        assert "/tmp/[svc]" in _output(buffer_console)

    def test_ask_with_default(self, buffer_console):
        session = CliSession(interactive=True, console=buffer_console)
        with patch("svcscaffold.session.Prompt.ask", return_value="prod") as ask:
            assert session.ask("Service stage", "dev") == "prod"
        ask.assert_called_once_with("Service stage", console=buffer_console, default="dev")

    def test_ask_without_default(self, buffer_console):
        session = CliSession(interactive=True, console=buffer_console)
        with patch("svcscaffold.session.Prompt.ask", return_value="my-service") as ask:
            assert session.ask("Service name") == "my-service"
        ask.assert_called_once_with("Service name", console=buffer_console)
