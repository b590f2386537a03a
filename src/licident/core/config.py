"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core and adapters expect so the app layer can build them safely.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportConfig:
    """Report rendering settings consumed by the formatting adapter."""

    snippet_chars: int
    show_urls: bool


@dataclass(frozen=True)
class LogFileConfig:
    """Rotating log file settings."""

    enabled: bool
    path: str
    max_bytes: int
    backup_count: int


@dataclass(frozen=True)
class LoggingConfig:
    """Logging settings applied by the CLI entry point."""

    enabled: bool
    level: str
    console: bool
    file: LogFileConfig
