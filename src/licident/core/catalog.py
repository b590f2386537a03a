"""Digest-keyed license catalog (core domain).

Metadata repositories attach a license to every installable unit, and the same
license text arrives many times with different whitespace or URLs. The catalog
keeps one canonical instance per digest and remembers the rest as members of
that license's group.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from licident.core.license import License
from licident.core.ports import LabeledLicense, LicenseSourcePort

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DuplicateGroup:
    """All licenses that share one digest, canonical instance first."""

    digest: int
    canonical: License
    members: tuple[License, ...]


class LicenseCatalog:
    """Thread-safe set of licenses keyed by digest."""

    def __init__(self, licenses: Iterable[License] = ()) -> None:
        self._lock = threading.Lock()
        self._groups: dict[int, list[License]] = {}
        for license in licenses:
            self.add(license)

    def add(self, license: License) -> License:
        """Register a license and return the canonical instance for its digest."""

        # Digest is computed outside the catalog lock; License guards its own.
        digest = license.digest
        with self._lock:
            members = self._groups.get(digest)
            if members is None:
                self._groups[digest] = [license]
                return license
            if not any(member is license for member in members):
                members.append(license)
                LOGGER.debug("Duplicate license %032x (%s copies)", digest, len(members))
            return members[0]

    def get(self, digest: int) -> Optional[License]:
        with self._lock:
            members = self._groups.get(digest)
        return members[0] if members else None

    def duplicates(self) -> List[DuplicateGroup]:
        """Return groups that hold more than one distinct instance."""

        with self._lock:
            snapshot = [(digest, list(members)) for digest, members in self._groups.items()]
        return [
            DuplicateGroup(digest=digest, canonical=members[0], members=tuple(members))
            for digest, members in snapshot
            if len(members) > 1
        ]

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, License):
            return False
        digest = item.digest
        with self._lock:
            return digest in self._groups

    def __len__(self) -> int:
        with self._lock:
            return len(self._groups)

    def __iter__(self) -> Iterator[License]:
        with self._lock:
            canonicals = [members[0] for members in self._groups.values()]
        return iter(canonicals)


def build_catalog(source: LicenseSourcePort) -> tuple[LicenseCatalog, List[LabeledLicense]]:
    """Load every license from a source into a fresh catalog."""

    labeled = source.load()
    catalog = LicenseCatalog(item.license for item in labeled)
    LOGGER.info("%s licenses loaded, %s distinct", len(labeled), len(catalog))
    return catalog, labeled


def unique_licenses(licenses: Iterable[License]) -> List[License]:
    """Drop licenses whose digest was already seen, keeping first occurrences."""

    seen: set[License] = set()
    unique: List[License] = []
    for license in licenses:
        if license in seen:
            continue
        seen.add(license)
        unique.append(license)
    return unique
