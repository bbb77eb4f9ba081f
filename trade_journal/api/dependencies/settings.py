"""Settings dependency for API routes."""

from __future__ import annotations

from trade_journal.config import AppSettings, get_settings


def settings_dependency() -> AppSettings:
    return get_settings()
