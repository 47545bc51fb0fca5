"""Protocolo para builders de parâmetros do SES."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sesmail.app.protocols.models import Email


class PayloadBuilderProtocol(Protocol):
    """Contrato para montar o conjunto de parâmetros de uma ação SES."""

    def build(self, email: Email, access_key_id: str) -> dict[str, str]: ...
