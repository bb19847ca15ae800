"""Interactive username and password prompts.

Both prompts read one line from standard input. The password prompt turns
off terminal echo while reading. Terminal mode is process-wide state, so
these helpers must not run concurrently from several threads.
"""

import io
import logging
import os
import sys
import termios
from contextlib import contextmanager

from ..config import settings

logger = logging.getLogger(__name__)

# Index of c_lflag in the list returned by termios.tcgetattr()
_LFLAG = 3


def _tty_fileno(stream) -> int | None:
    """Return the file descriptor of stream if it is a terminal."""
    try:
        fd = stream.fileno()
    except (AttributeError, ValueError, io.UnsupportedOperation):
        return None
    return fd if os.isatty(fd) else None


@contextmanager
def echo_disabled(stream=None):
    """
    Turn off character echo on stream for the duration of the block.

    The original terminal attributes are restored on every exit path,
    including exceptions. Streams that are not terminals are left alone.
    """
    stream = sys.stdin if stream is None else stream
    fd = _tty_fileno(stream)
    if fd is None:
        yield
        return

    saved = termios.tcgetattr(fd)
    quiet = termios.tcgetattr(fd)
    quiet[_LFLAG] &= ~termios.ECHO
    termios.tcsetattr(fd, termios.TCSANOW, quiet)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)


def _read_line(stream, max_length: int) -> str | None:
    """Read at most max_length - 1 characters and drop one trailing newline."""
    try:
        line = stream.readline(max_length - 1)
    except MemoryError:
        logger.error(f"Error allocating {max_length + 1} bytes.")
        return None

    if line.endswith("\n"):
        line = line[:-1]
    return line


def _prompt(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def get_password(max_length: int, stream=None) -> str | None:
    """
    Prompt for a password without echoing it.

    Args:
        max_length: Buffer size; at most max_length - 1 characters are read.
        stream: Input stream, sys.stdin by default.

    Returns:
        The password without its newline ("" on end of input), or None
        if max_length is invalid or memory ran out.
    """
    if max_length < 1:
        logger.error(f"Invalid password length {max_length}")
        return None

    stream = sys.stdin if stream is None else stream
    _prompt(settings.password_prompt)

    with echo_disabled(stream):
        password = _read_line(stream, max_length)

    if password is None:
        return None

    # the user's Enter was not echoed
    sys.stdout.write("\n")
    sys.stdout.flush()
    return password


def get_username(max_length: int, stream=None) -> str | None:
    """Prompt for a username; same contract as get_password, with echo on."""
    if max_length < 1:
        logger.error(f"Invalid username length {max_length}")
        return None

    stream = sys.stdin if stream is None else stream
    _prompt(settings.username_prompt)
    return _read_line(stream, max_length)
