"""Pydantic schemas for clihelpers."""

from .cookie import CookieRecord

__all__ = [
    "CookieRecord",
]
