"""Tests for the command-line entry point."""

import os

import pytest
from clihelpers import __version__
from clihelpers.config import settings
from clihelpers.main import main
from clihelpers.utils.alloc import ExitCode


class TestFilesystemCommands:
    """Tests for exists, touch and rm commands."""

    def test_exists(self, tmp_path, capsys):
        """exists prints yes and succeeds for an existing path."""
        assert main(["exists", str(tmp_path)]) == ExitCode.SUCCESS
        assert capsys.readouterr().out == "yes\n"

    def test_exists_missing(self, tmp_path, capsys):
        """exists prints no and fails for a missing path."""
        assert main(["exists", str(tmp_path / "nope")]) == ExitCode.FAILURE
        assert capsys.readouterr().out == "no\n"

    def test_touch_then_rm(self, tmp_path):
        """touch creates the file and rm removes it."""
        path = tmp_path / "f.txt"
        assert main(["touch", str(path)]) == ExitCode.SUCCESS
        assert path.exists()
        assert main(["rm", str(path)]) == ExitCode.SUCCESS
        assert not path.exists()


class TestTextCommands:
    """Tests for expand, trim and tmpfile commands."""

    def test_expand(self, home, capsys):
        """expand prints the expanded path."""
        assert main(["expand", "~/docs"]) == ExitCode.SUCCESS
        assert capsys.readouterr().out == "/home/u/docs\n"

    def test_trim(self, capsys):
        """trim prints the stripped text."""
        assert main(["trim", "  hello  "]) == ExitCode.SUCCESS
        assert capsys.readouterr().out == "hello\n"

    def test_tmpfile(self, capsys):
        """tmpfile prints a name with the pid."""
        assert main(["tmpfile", "/tmp/app-%d.tmp"]) == ExitCode.SUCCESS
        assert capsys.readouterr().out == f"/tmp/app-{os.getpid()}.tmp\n"

    def test_tmpfile_bad_format(self, capsys):
        """A format without a placeholder fails cleanly."""
        assert main(["tmpfile", "/tmp/no-placeholder"]) == ExitCode.FAILURE
        assert capsys.readouterr().out == ""


class TestCookieCommand:
    """Tests for cookie-expiry command."""

    def test_found(self, cookie_jar, capsys):
        """The expiry is printed."""
        assert main(["cookie-expiry", str(cookie_jar), "example.com", "SESSID"]) == ExitCode.SUCCESS
        assert capsys.readouterr().out == "1700000000\n"

    def test_not_found(self, cookie_jar, capsys):
        """A missing cookie prints 0 and fails."""
        assert main(["cookie-expiry", str(cookie_jar), "nowhere.org", "x"]) == ExitCode.FAILURE
        assert capsys.readouterr().out == "0\n"


class TestParser:
    """Tests for argument parsing."""

    def test_version(self, capsys):
        """--version prints the package version."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_command_required(self, capsys):
        """Running without a command is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2


class TestLogLevel:
    """Tests for log level selection."""

    def test_unknown_level_is_usage_error(self, capsys):
        """An unknown --log-level is rejected by the parser."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "bogus", "trim", "x"])
        assert exc_info.value.code == 2

    def test_level_is_case_insensitive(self, capsys):
        """Lower-case level names are accepted."""
        assert main(["--log-level", "debug", "trim", " x "]) == ExitCode.SUCCESS
        assert capsys.readouterr().out == "x\n"

    def test_bad_configured_level_fails_cleanly(self, monkeypatch, capsys):
        """A bad level from the environment is reported, not raised."""
        monkeypatch.setattr(settings, "log_level", "bogus")
        assert main(["trim", "x"]) == ExitCode.FAILURE
        captured = capsys.readouterr()
        assert "invalid log level" in captured.err
        assert captured.out == ""
