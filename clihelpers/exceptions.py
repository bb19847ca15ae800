"""Custom exceptions for clihelpers.

The public helpers report failure through sentinel return values or by
terminating the process. These exceptions carry failures between internal
layers, and out of parse_cookie_line for callers that want the reason.
"""


class ClihelpersError(Exception):
    """Base exception for all clihelpers errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class CookieFormatError(ClihelpersError):
    """A cookie-jar line is not a valid seven-field Netscape record."""
    pass


class PathExpansionError(ClihelpersError):
    """A tilde path could not be expanded."""
    pass
