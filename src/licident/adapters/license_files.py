"""File adapter for license sources.

Reads license bodies from plain text files or from a JSON manifest and
implements the core LicenseSourcePort.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Iterable, Optional

from licident.core.license import License
from licident.core.ports import LabeledLicense

LOGGER = logging.getLogger(__name__)


def load_license_file(path: str, url: Optional[str] = None, encoding: str = "utf-8") -> LabeledLicense:
    """Read one license body from a text file."""

    with open(path, "r", encoding=encoding, newline="") as handle:
        body = handle.read()
    return LabeledLicense(label=path, license=License(url, body))


def load_manifest(path: str) -> list[LabeledLicense]:
    """Load licenses from a JSON manifest.

    The manifest is a list of objects, each with an optional ``url`` and either
    an inline ``body`` or a ``body_file`` resolved relative to the manifest.
    """

    with open(path, "r", encoding="utf-8") as handle:
        entries = json.load(handle)
    if not isinstance(entries, list):
        raise ValueError(f"Manifest must be a JSON list: {path}")

    base_dir = os.path.dirname(os.path.abspath(path))
    loaded: list[LabeledLicense] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Manifest entry {index} must be a JSON object")
        url = entry.get("url")
        label = entry.get("label")
        if "body" in entry:
            body = entry["body"]
            label = label or f"{path}[{index}]"
        elif entry.get("body_file"):
            body_path = entry["body_file"]
            if not os.path.isabs(body_path):
                body_path = os.path.join(base_dir, body_path)
            with open(body_path, "r", encoding="utf-8", newline="") as handle:
                body = handle.read()
            label = label or body_path
        else:
            raise ValueError(f"Manifest entry {index} needs 'body' or 'body_file'")
        loaded.append(LabeledLicense(label=label, license=License(url, body)))

    LOGGER.info("Loaded %s licenses from manifest %s", len(loaded), path)
    return loaded


class FileLicenseSource:
    """License source backed by text files and an optional manifest."""

    def __init__(self, paths: Iterable[str] = (), manifest: Optional[str] = None, url: Optional[str] = None) -> None:
        self._paths = list(paths)
        self._manifest = manifest
        self._url = url

    def load(self) -> list[LabeledLicense]:
        loaded = [load_license_file(path, url=self._url) for path in self._paths]
        if self._manifest:
            loaded.extend(load_manifest(self._manifest))
        return loaded
