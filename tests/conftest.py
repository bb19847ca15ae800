"""Shared test fixtures for clihelpers."""

import termios

import pytest

from clihelpers.config import settings
from clihelpers.utils import prompt


COOKIE_JAR = (
    "# Netscape HTTP Cookie File\n"
    "# This is a generated file! Do not edit.\n"
    "\n"
    "example.com\tTRUE\t/\tFALSE\t1700000000\tSESSID\tabc123\n"
    "example.com\tTRUE\t/\tFALSE\t1800000000\ttheme\tdark\n"
    "example.com.evil\tTRUE\t/\tFALSE\t1111111111\tSESSID\tforged\n"
    "#HttpOnly_.secure.example.org\tTRUE\t/app\tTRUE\t1900000000\ttoken\txyz\n"
    "broken line without tabs\n"
    "other.net\tFALSE\t/\tFALSE\tnever\tSESSID\tbad-expiry\n"
)


@pytest.fixture
def cookie_jar(tmp_path):
    """Write a small Netscape cookie jar and return its path."""
    path = tmp_path / "cookies.txt"
    path.write_text(COOKIE_JAR)
    return path


@pytest.fixture
def home(monkeypatch):
    """Point the home-directory variable at a fixed path."""
    monkeypatch.setenv(settings.home_env_var, "/home/u")
    return "/home/u"


@pytest.fixture
def fake_terminal(monkeypatch):
    """Pretend stdin is a terminal and record every mode change.

    Returns a dict with the current lflag and a list of applied lflags.
    """
    state = {
        "lflag": termios.ECHO | termios.ICANON,
        "applied": [],
    }

    def tcgetattr(fd):
        return [0, 0, 0, state["lflag"], 0, 0, []]

    def tcsetattr(fd, when, attrs):
        state["lflag"] = attrs[3]
        state["applied"].append(attrs[3])

    monkeypatch.setattr(prompt, "_tty_fileno", lambda stream: 0)
    monkeypatch.setattr(prompt.termios, "tcgetattr", tcgetattr)
    monkeypatch.setattr(prompt.termios, "tcsetattr", tcsetattr)
    return state
