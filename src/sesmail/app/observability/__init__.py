"""Contexto de observabilidade (correlation_id)."""

from __future__ import annotations

from sesmail.app.observability.correlation import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
