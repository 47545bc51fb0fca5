"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sesmail.app.protocols.models import Credentials


class SESHttpClientProtocol(Protocol):
    """Contrato mínimo para o transporte assinado do SES."""

    def post(self, params: dict[str, str], credentials: Credentials) -> str: ...

    def get(self, params: dict[str, str], credentials: Credentials) -> str: ...
