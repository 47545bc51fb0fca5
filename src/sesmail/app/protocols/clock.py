"""Protocolo de fonte de tempo."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime


class ClockProtocol(Protocol):
    """Contrato mínimo para obter o instante atual."""

    def now(self) -> datetime: ...
