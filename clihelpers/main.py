"""Command-line entry point for trying the helpers by hand."""

import argparse
import logging
import sys

from . import __version__
from .config import settings
from .utils import cookies, fs, text
from .utils.alloc import ExitCode

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level: str | None = None) -> None:
    """Send diagnostics to stderr at the configured level.

    Raises:
        ValueError: If the level is not a standard logging level name.
    """
    level = (level or settings.log_level).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown level: {level!r}")

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="clihelpers",
        description="Run a single helper and print its result.",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override CLIHELPERS_LOG_LEVEL (e.g. DEBUG).",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = p.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("exists", "Exit 0 if the path exists."),
        ("touch", "Create the file if it does not exist."),
        ("rm", "Delete the file if it exists."),
        ("expand", "Expand a leading ~/ to $HOME."),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("path")

    tmp_p = sub.add_parser("tmpfile", help="Print a pid-based temp filename.")
    tmp_p.add_argument("format", help='printf-style format, e.g. "/tmp/app-%%d.tmp".')

    trim_p = sub.add_parser("trim", help="Strip surrounding whitespace.")
    trim_p.add_argument("text")

    cookie_p = sub.add_parser("cookie-expiry", help="Print a cookie's expiry (epoch seconds).")
    cookie_p.add_argument("cookie_file")
    cookie_p.add_argument("domain")
    cookie_p.add_argument("name")

    return p


def main(argv: list[str] | None = None) -> int:
    """Entry point; returns an ExitCode."""
    args = _build_parser().parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as e:
        print(f"clihelpers: invalid log level: {e}", file=sys.stderr)
        return ExitCode.FAILURE
    logger.debug(f"Running {args.command}")

    if args.command == "exists":
        ok = fs.file_exists(args.path)
        print("yes" if ok else "no")
    elif args.command == "touch":
        ok = fs.touch(args.path)
    elif args.command == "rm":
        fs.delete_file(args.path)
        ok = not fs.file_exists(args.path)
    elif args.command == "expand":
        print(text.expand_tilde(args.path))
        ok = True
    elif args.command == "tmpfile":
        try:
            name = fs.get_tmpfile(args.format)
        except (TypeError, ValueError) as e:
            logger.error(f"Bad tmpfile format {args.format!r}: {e}")
            name = None
        ok = name is not None
        if ok:
            print(name)
    elif args.command == "trim":
        print(text.strtrim(args.text))
        ok = True
    else:
        expires = cookies.cookie_expire_time(args.cookie_file, args.domain, args.name)
        print(expires)
        ok = expires != 0

    return ExitCode.SUCCESS if ok else ExitCode.FAILURE


if __name__ == "__main__":
    sys.exit(main())
