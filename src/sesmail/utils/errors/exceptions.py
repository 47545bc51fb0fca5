"""Exceções do cliente SES.

Taxonomia:
- SESTransportError: a troca HTTP em si falhou (conexão, DNS, timeout)
- SESRemoteRejectionError: o serviço respondeu com status diferente de 200
"""

from __future__ import annotations

# Apenas informativo: o cliente nunca re-tenta
_RETRYABLE_STATUS_CODES = frozenset({429})


class SESError(RuntimeError):
    """Base para falhas no envio via SES."""


class SESTransportError(SESError):
    """Falha de transporte (conexão, DNS, timeout) sem resposta do serviço."""

    def __init__(self, message: str, original: BaseException | None = None) -> None:
        super().__init__(message)
        self.original = original


class SESRemoteRejectionError(SESError):
    """Resposta do SES com status diferente de 200.

    Attributes:
        status_code: Status HTTP retornado
        body: Corpo da resposta, sem modificação
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"error code {status_code}. response: {body}")

    @property
    def is_retryable(self) -> bool:
        """True para rate limiting (429) e erros de servidor (5xx)."""
        return self.status_code in _RETRYABLE_STATUS_CODES or self.status_code >= 500
