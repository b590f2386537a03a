"""Helpers for working with license URLs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

# Schemes that resolve to a URL handler on the platforms that publish licenses.
KNOWN_SCHEMES = frozenset({"http", "https", "ftp", "file", "jar", "mailto"})


@dataclass(frozen=True)
class LicenseURL:
    """A parsed license URL that renders back to the string it came from."""

    raw: str
    scheme: str
    netloc: str
    path: str
    query: str
    fragment: str

    def __str__(self) -> str:
        return self.raw


def parse_license_url(raw_value: str) -> Optional[LicenseURL]:
    """Parse a URL string, returning None when it is malformed."""

    value = raw_value.strip()
    try:
        parts = urlsplit(value)
        # Port is validated lazily by urlsplit.
        parts.port
    except ValueError:
        return None

    scheme = parts.scheme.lower()
    if scheme not in KNOWN_SCHEMES:
        return None
    # jar URLs must name an entry inside the archive.
    if scheme == "jar" and "!/" not in value:
        return None

    return LicenseURL(
        raw=value,
        scheme=scheme,
        netloc=parts.netloc,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
    )
