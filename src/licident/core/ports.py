"""Ports (interfaces) used by the core.

Ports define the minimal contracts for license sources so that the dedup
catalog and reports can be fed from files, manifests or a metadata store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from licident.core.license import License


@dataclass(frozen=True)
class LabeledLicense:
    """A license together with a human-readable label for where it came from."""

    label: str
    license: License


class LicenseSourcePort(Protocol):
    """Source of licenses to fingerprint or deduplicate."""

    def load(self) -> list[LabeledLicense]:
        ...
