"""Shared report formatting helpers.

Keeping formatting here prevents drift between CLI commands and keeps digest
listings and duplicate reports consistent.
"""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from licident.core.catalog import DuplicateGroup
from licident.core.config import ReportConfig
from licident.core.license import License
from licident.core.normalization import format_digest, normalize_license_text
from licident.core.ports import LabeledLicense


def body_snippet(body: str, chars: int) -> str:
    """Return a single-line preview of a license body."""

    normalized = normalize_license_text(body)
    if len(normalized) <= chars:
        return normalized
    return normalized[: max(chars - 3, 0)].rstrip() + "..."


def format_digest_line(labeled: LabeledLicense, config: ReportConfig) -> str:
    """Create the `<digest>  <label>` line printed by the digest command."""

    line = f"{labeled.license.digest_hex()}  {labeled.label}"
    url = labeled.license.url
    if config.show_urls and url is not None:
        line = f"{line}  <{url}>"
    return line


def _labels_for(license: License, labeled: list[LabeledLicense]) -> list[str]:
    return [item.label for item in labeled if item.license is license]


def build_duplicates_table(
    groups: list[DuplicateGroup],
    labeled: list[LabeledLicense],
    config: ReportConfig,
) -> Table:
    """Render duplicate groups as a rich table, one row per group."""

    table = Table(title="Duplicate licenses")
    table.add_column("Digest", style="cyan", no_wrap=True)
    table.add_column("Copies", justify="right")
    table.add_column("Sources")
    table.add_column("Preview")
    if config.show_urls:
        table.add_column("URLs")

    for group in groups:
        sources: list[str] = []
        urls: list[str] = []
        for member in group.members:
            sources.extend(_labels_for(member, labeled))
            if member.url is not None and str(member.url) not in urls:
                urls.append(str(member.url))
        row = [
            format_digest(group.digest),
            str(len(group.members)),
            Text("\n".join(sources)),
            Text(body_snippet(group.canonical.body, config.snippet_chars)),
        ]
        if config.show_urls:
            row.append(Text("\n".join(urls)))
        table.add_row(*row)
    return table
