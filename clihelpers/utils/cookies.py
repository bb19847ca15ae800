"""Netscape cookie-jar parsing and expiry lookup.

Cookie jars are plain text, one cookie per line, seven tab-separated fields:

    domain  include_subdomains  path  secure  expires  name  value

Lines starting with "#" are comments, except for curl's "#HttpOnly_"
domain prefix which marks an HttpOnly cookie.
"""

import logging
import os
import time
from typing import Iterator

from pydantic import ValidationError

from ..exceptions import CookieFormatError
from ..schemas import CookieRecord

logger = logging.getLogger(__name__)

HTTP_ONLY_PREFIX = "#HttpOnly_"
FIELD_NAMES = ("domain", "include_subdomains", "path", "secure", "expires", "name", "value")


def parse_cookie_line(line: str) -> CookieRecord:
    """
    Parse one cookie-jar line into a CookieRecord.

    Raises:
        CookieFormatError: If the line is blank, a comment, does not have
            exactly seven fields, or has a non-numeric expiry.
    """
    line = line.rstrip("\r\n")
    http_only = line.startswith(HTTP_ONLY_PREFIX)
    if http_only:
        line = line[len(HTTP_ONLY_PREFIX):]

    if not line.strip() or line.startswith("#"):
        raise CookieFormatError("Not a cookie record", details={"line": line})

    fields = line.split("\t")
    if len(fields) != len(FIELD_NAMES):
        raise CookieFormatError(
            f"Expected {len(FIELD_NAMES)} fields, got {len(fields)}",
            details={"line": line}
        )

    data = dict(zip(FIELD_NAMES, fields))
    try:
        return CookieRecord(**data, http_only=http_only)
    except ValidationError as e:
        raise CookieFormatError("Invalid cookie record", details={"line": line, "errors": e.errors()})


def iter_cookies(cookie_file: str | os.PathLike) -> Iterator[CookieRecord]:
    """Yield every well-formed record in cookie_file; other lines are skipped."""
    with open(cookie_file, "r", encoding="utf-8", errors="replace") as f:
        for lineno, line in enumerate(f, start=1):
            try:
                yield parse_cookie_line(line)
            except CookieFormatError as e:
                logger.debug(f"{cookie_file}:{lineno}: skipped ({e.message})")


def cookie_expire_time(cookie_file: str | os.PathLike, domain: str, name: str) -> int:
    """
    Look up the expiry of a cookie.

    The first record whose domain and name both equal the arguments wins.

    Returns:
        Expiry as epoch seconds, or 0 if no record matches or the file
        cannot be read.
    """
    try:
        for record in iter_cookies(cookie_file):
            if record.domain == domain and record.name == name:
                return record.expires
    except OSError as e:
        logger.debug(f"Could not read cookie file {cookie_file}: {e}")

    return 0


def cookie_is_expired(
    cookie_file: str | os.PathLike,
    domain: str,
    name: str,
    now: float | None = None
) -> bool:
    """Return True if the cookie is missing or its expiry is not after now."""
    if now is None:
        now = time.time()
    expires = cookie_expire_time(cookie_file, domain, name)
    return expires == 0 or expires <= now
