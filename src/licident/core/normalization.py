"""Normalization and digest helpers (core domain)."""

from __future__ import annotations

import hashlib

DIGEST_ALGORITHM = "md5"
DIGEST_SIZE = 16

# Characters treated as whitespace when collapsing runs. Non-breaking spaces
# (U+00A0, U+2007, U+202F) and NEL (U+0085) are not in the set; digests
# persisted by the metadata store depend on this exact set.
WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r"
    "\x1c\x1d\x1e\x1f"
    " "
    "\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2008\u2009\u200a"
    "\u2028\u2029"
    "\u205f"
    "\u3000"
)


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


def _is_trimmable(char: str) -> bool:
    # Outer trimming also drops control characters at or below U+0020.
    return char <= " " or char in WHITESPACE


def _trim(text: str) -> str:
    start = 0
    end = len(text)
    while start < end and _is_trimmable(text[start]):
        start += 1
    while end > start and _is_trimmable(text[end - 1]):
        end -= 1
    return text[start:end]


def normalize_license_text(text: str) -> str:
    """Trim the text and reduce every whitespace run to a single space."""

    trimmed = _trim(text)
    parts: list[str] = []
    in_run = False
    for char in trimmed:
        if char in WHITESPACE:
            in_run = True
            continue
        if in_run:
            parts.append(" ")
            in_run = False
        parts.append(char)
    return "".join(parts)


def compute_license_digest(normalized_text: str) -> int:
    """Return the MD5 of the normalized text as an unsigned 128-bit integer.

    Raises RuntimeError when the runtime does not provide MD5, which only
    happens on a misconfigured (for example FIPS-restricted) deployment.
    """

    try:
        algorithm = hashlib.new(DIGEST_ALGORITHM, usedforsecurity=False)
    except ValueError as exc:
        raise RuntimeError(f"{DIGEST_ALGORITHM} digest is unavailable") from exc

    # Unpaired surrogates are encoded as "?" to keep digests stable for text
    # that came from UTF-16 sources.
    algorithm.update(normalized_text.encode("utf-8", errors="replace"))
    return int.from_bytes(algorithm.digest(), "big")


def format_digest(digest: int) -> str:
    """Render a digest as zero-padded lowercase hex."""

    return f"{digest:0{DIGEST_SIZE * 2}x}"
