"""License identity (core domain).

A License is an immutable body of text plus an optional URL pointing at the
full text. Two licenses are the same license when their bodies normalize to
the same text, which is decided by comparing digests rather than fields.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from licident.core.normalization import compute_license_digest, format_digest, normalize_license_text
from licident.core.urls import LicenseURL, parse_license_url

LOGGER = logging.getLogger(__name__)


class License:
    """A software license identified by the digest of its normalized body."""

    __slots__ = ("_body", "_url", "_digest", "_lock")

    def __init__(self, url_string: Optional[str], body: str) -> None:
        """Create a license from its body and an optional URL string.

        The body is either the full license text or an annotation for a license
        fully described at the URL. A URL that cannot be parsed is dropped and
        the license is created without one.

        Raises:
            ValueError: when body is None.
        """

        if body is None:
            raise ValueError("body cannot be null")
        if not isinstance(body, str):
            raise TypeError(f"body must be a str, not {type(body).__name__}")

        url: Optional[LicenseURL] = None
        if url_string is not None:
            url = parse_license_url(url_string)
            if url is None:
                LOGGER.debug("Discarding malformed license URL %r", url_string)

        self._body = body
        self._url = url
        self._digest: Optional[int] = None
        self._lock = threading.Lock()

    @property
    def url(self) -> Optional[LicenseURL]:
        return self._url

    @property
    def body(self) -> str:
        return self._body

    @property
    def digest(self) -> int:
        """MD5 of the normalized body as an unsigned 128-bit integer.

        Computed on first access and cached; concurrent first readers wait for
        a single computation.
        """

        digest = self._digest
        if digest is not None:
            return digest
        with self._lock:
            if self._digest is None:
                self._digest = compute_license_digest(normalize_license_text(self._body))
            return self._digest

    def get_url(self) -> Optional[LicenseURL]:
        return self.url

    def get_body(self) -> str:
        return self.body

    def get_digest(self) -> int:
        return self.digest

    def digest_hex(self) -> str:
        return format_digest(self.digest)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, License):
            return NotImplemented
        return other.digest == self.digest

    def __hash__(self) -> int:
        return hash(self.digest)

    def __getstate__(self) -> tuple:
        return self._body, self._url, self._digest

    def __setstate__(self, state: tuple) -> None:
        self._body, self._url, self._digest = state
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        url = str(self._url) if self._url is not None else None
        return f"License(url={url!r}, digest={self.digest_hex()})"
