"""Text helpers for line and path handling."""

import logging
import os

from ..config import settings
from ..exceptions import PathExpansionError

logger = logging.getLogger(__name__)

# isspace() in the C locale
C_WHITESPACE = " \t\n\v\f\r"


def line_starts_with(line, prefix) -> bool:
    """Return True if line begins with prefix. The empty prefix always matches."""
    return line[:len(prefix)] == prefix


def strtrim(s: str | None) -> str | None:
    """Strip leading and trailing whitespace; None and "" pass through."""
    if not s:
        return s
    return s.strip(C_WHITESPACE)


def _home_directory() -> str:
    """Return the home directory from the environment."""
    home = os.environ.get(settings.home_env_var)
    if not home:
        raise PathExpansionError(
            f"${settings.home_env_var} is not set",
            details={"variable": settings.home_env_var}
        )
    return home


def expand_tilde(path: str) -> str:
    """
    Expand a leading "~/" to the user's home directory.

    Only the exact "~/" prefix is expanded; "~user/..." and "~docs" are
    returned as they are. Results are truncated to settings.path_max
    characters, so very long paths may be cut silently.

    Returns:
        The expanded path, or the input unchanged if it has no "~/" prefix
        or the home directory is unknown.
    """
    if not line_starts_with(path, "~/"):
        return path[:settings.path_max]

    try:
        expanded = (_home_directory() + path[1:])[:settings.path_max]
    except PathExpansionError as e:
        logger.error(f"Could not expand {path}: {e.message}")
        return path

    if not expanded:
        logger.error(f"Expansion of {path} is empty")
        return path

    return expanded
