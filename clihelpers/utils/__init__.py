"""Utility helpers for clihelpers.

Each concern lives in its own module. Import convention: use module-level
imports for clarity.

    from clihelpers.utils import fs, text, prompt, cookies, alloc
    if not fs.file_exists(path):
        fs.touch(path)
    path = text.expand_tilde("~/.app/cookies.txt")
    expires = cookies.cookie_expire_time(path, "example.com", "SESSID")
    buf = alloc.xmalloc(4096)
"""

from . import alloc, cookies, fs, prompt, text

__all__ = ["alloc", "cookies", "fs", "prompt", "text"]
