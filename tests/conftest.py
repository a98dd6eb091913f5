# ABOUTME: Global pytest configuration for all tests
# ABOUTME: Clears DRAGONS_ESCAPE_* env vars and provides a recording presenter and scripted input

import io

import pytest

from castle import build_castle_registry
from session.game_configuration import GameConfiguration
from game_interface import TerminalPresenter


class RecordingPresenter:
    """Presenter that records every call instead of drawing anything."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if not name.startswith("show_"):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, *args))

        return record

    def names(self):
        return [call[0] for call in self.calls]

    def count(self, name):
        return self.names().count(name)

    def rooms_shown(self):
        return [call[1].name for call in self.calls if call[0] == "show_room"]

    def messages(self, name):
        return [call[1] for call in self.calls if call[0] == name]


class ScriptedInput:
    """input() stand-in that replays lines, then raises EOFError."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.reads = 0

    def __call__(self, *args):
        if self.reads >= len(self.lines):
            raise EOFError
        line = self.lines[self.reads]
        self.reads += 1
        return line


@pytest.fixture(autouse=True)
def clear_game_env_vars(monkeypatch):
    """
    Remove DRAGONS_ESCAPE_* variables so a developer's shell never leaks into tests.

    Tests that exercise env loading set their own with monkeypatch.setenv.
    """
    import os

    for key in list(os.environ):
        if key.upper().startswith("DRAGONS_ESCAPE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def registry():
    return build_castle_registry()


@pytest.fixture
def test_config():
    """Configuration with no title screen and no pauses."""
    return GameConfiguration(
        enable_animations=False,
        show_title_screen=False,
        clear_screen=False,
    )


@pytest.fixture
def recording_presenter():
    return RecordingPresenter()


@pytest.fixture
def scripted_input():
    return ScriptedInput


@pytest.fixture
def terminal_output():
    return io.StringIO()


@pytest.fixture
def quiet_terminal(terminal_output):
    """TerminalPresenter writing to a StringIO with a sleep that never waits."""
    sleeps = []
    presenter = TerminalPresenter(
        stream=terminal_output,
        sleep=sleeps.append,
        enable_animations=True,
        animation_speed=1.0,
        clear_screen=True,
    )
    presenter.sleeps = sleeps
    return presenter
