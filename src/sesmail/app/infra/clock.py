"""Fonte de tempo do sistema."""

from __future__ import annotations

from datetime import UTC, datetime


class SystemClock:
    """Relógio real, sempre em UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)
