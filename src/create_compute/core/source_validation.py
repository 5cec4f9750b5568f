"""Validation of ``--from`` values (path, GitHub URL, or Fiddle URL).

Pure functions — each returns a user-facing error message, or ``None``
when the value is acceptable.
"""

from __future__ import annotations

from urllib.parse import urlsplit

ALLOWED_SOURCE_HOSTS: frozenset[str] = frozenset({
    "github.com",
    "fiddle.fastly.dev",
    "fiddle.fastlydemo.net",
})


def validate_source(value: str) -> str | None:
    """Check a source path or URL.

    A value without a URL scheme (or with a single-letter drive prefix
    such as ``C:``) is treated as a filesystem path and only checked for
    emptiness.  Schemes compare case-insensitively; only ``https`` on an
    allow-listed host is accepted.
    """
    if value == "":
        return "Cannot be empty!"
    try:
        parts = urlsplit(value)
        host = parts.hostname
    except ValueError:
        return "Not a valid URL!"

    scheme = parts.scheme.lower()
    if scheme == "" or len(scheme) == 1:
        return None
    if scheme != "https":
        return "URL must begin with https!"
    if host not in ALLOWED_SOURCE_HOSTS:
        return "URL must belong to GitHub or Fastly Fiddle!"
    return None
