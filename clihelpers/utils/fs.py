"""Filesystem helpers.

All helpers here are best-effort: they report failure through their return
value and never raise for an unusable path.
"""

import logging
import os

from ..config import settings

logger = logging.getLogger(__name__)

_TOUCH_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_NONBLOCK | os.O_NOCTTY


def file_exists(path: str | os.PathLike | None) -> bool:
    """Return True if a stat() on path succeeds.

    Files, directories and symlinks are not distinguished.
    """
    if not path:
        return False
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def delete_file(path: str | os.PathLike | None) -> None:
    """Unlink path if it exists; failures are ignored."""
    if not path:
        return

    if file_exists(path):
        try:
            os.unlink(path)
        except OSError as e:
            logger.debug(f"Could not delete {path}: {e}")


def touch(path: str | os.PathLike) -> bool:
    """
    Make sure path exists as a file.

    Unlike touch(1) this never truncates an existing file and does not
    update its modification time.

    Returns:
        True if the file could be opened (and created if missing).
    """
    try:
        fd = os.open(path, _TOUCH_FLAGS, settings.touch_mode)
    except (OSError, ValueError) as e:
        logger.debug(f"Could not touch {path}: {e}")
        return False

    os.close(fd)
    return True


def get_tmpfile(fmt: str) -> str | None:
    """
    Build a temporary filename from fmt and the current process id.

    Args:
        fmt: printf-style format with exactly one integer conversion,
            e.g. "/tmp/app-%d.tmp". The format is not validated.

    Returns:
        The formatted path, truncated to settings.path_max - 1 characters,
        or None if memory ran out.
    """
    try:
        name = fmt % os.getpid()
    except MemoryError:
        logger.error(f"Error allocating {settings.path_max + 1} bytes.")
        return None

    return name[:max(settings.path_max - 1, 0)]
