"""Pydantic schema for Netscape cookie-jar records."""

from pydantic import BaseModel, Field, field_validator


class CookieRecord(BaseModel):
    """One line of a Netscape/Mozilla cookie jar.

    Field order on disk: domain, include_subdomains, path, secure,
    expires, name, value (tab-separated).
    """

    domain: str
    include_subdomains: bool = False
    path: str = "/"
    secure: bool = False
    expires: int = Field(ge=0, description="Expiry as epoch seconds, 0 for session cookies")
    name: str
    value: str = ""
    http_only: bool = False

    @field_validator("include_subdomains", "secure", mode="before")
    @classmethod
    def parse_flag(cls, v):
        """Accept the TRUE/FALSE spelling used in cookie jars."""
        if isinstance(v, str):
            return v.strip().upper() == "TRUE"
        return v
