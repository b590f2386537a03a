"""Static configuration for licident.

All user-editable settings (report layout, logging) live in a single JSON file
for quick edits without touching Python. The file is optional; without it the
defaults below apply.
"""

from __future__ import annotations

import json
import os
from typing import Optional

from dotenv import load_dotenv

from licident.core.config import LogFileConfig, LoggingConfig, ReportConfig

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))

# Environment variable that points at an explicit config file.
CONFIG_ENV_VAR = "LICIDENT_CONFIG"
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.json")


def resolve_config_path() -> tuple[str, bool]:
    """Return (path, explicit) for the config file, honoring .env overrides."""

    load_dotenv()
    configured = os.getenv(CONFIG_ENV_VAR)
    if configured:
        return configured, True
    return DEFAULT_CONFIG_PATH, False


def load_json_config(path: Optional[str] = None) -> dict:
    """Load config.json with a flat, user-friendly schema."""

    explicit = path is not None
    if path is None:
        path, explicit = resolve_config_path()

    if not os.path.exists(path):
        if explicit:
            raise FileNotFoundError(f"Config file not found: {path}")
        return {}

    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def build_report_config(config: dict) -> ReportConfig:
    report = config.get("report", {})
    return ReportConfig(
        snippet_chars=int(report.get("snippet_chars", 60)),
        show_urls=bool(report.get("show_urls", True)),
    )


def build_logging_config(config: dict) -> LoggingConfig:
    logging_cfg = config.get("logging", {})
    file_cfg = logging_cfg.get("file", {})
    path = file_cfg.get("path", "logs/licident.log")
    if not os.path.isabs(path):
        path = os.path.join(PROJECT_ROOT, path)
    return LoggingConfig(
        enabled=bool(logging_cfg.get("enabled", False)),
        level=str(logging_cfg.get("level", "INFO")).upper(),
        console=bool(logging_cfg.get("console", True)),
        file=LogFileConfig(
            enabled=bool(file_cfg.get("enabled", False)),
            path=path,
            max_bytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
            backup_count=int(file_cfg.get("backup_count", 5)),
        ),
    )
