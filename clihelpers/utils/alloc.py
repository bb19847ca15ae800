"""Allocate-or-die wrappers and the fatal-error reporter.

These are the fatal tier: call sites that cannot continue after a failed
allocation use them instead of checking a return value. The other helpers
report failure through their return value.
"""

import sys
from enum import IntEnum
from typing import NoReturn


class ExitCode(IntEnum):
    SUCCESS = 0
    FAILURE = 1


def die(fmt: str, *args) -> NoReturn:
    """Write a formatted diagnostic to stderr and exit with FAILURE."""
    message = fmt % args if args else fmt
    sys.stderr.write(message + "\n")
    sys.stderr.flush()
    sys.exit(ExitCode.FAILURE)


def _allocate(nbytes: int) -> bytearray:
    return bytearray(nbytes)


def xmalloc(size: int) -> bytearray:
    """Return a zero-filled buffer of size bytes, or exit the process."""
    if size < 0:
        die("xmalloc: failed to allocate %d bytes", size)
    try:
        return _allocate(size)
    except (MemoryError, OverflowError, ValueError):
        die("xmalloc: failed to allocate %d bytes", size)


def xcalloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes, or exit the process."""
    # sizes are unsigned; reject before the product hides a negative factor
    if count < 0 or size < 0:
        die("xcalloc: failed to allocate %d * %d bytes", count, size)
    try:
        return _allocate(count * size)
    except (MemoryError, OverflowError, ValueError):
        die("xcalloc: failed to allocate %d * %d bytes", count, size)
