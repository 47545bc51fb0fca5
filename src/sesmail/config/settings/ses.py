"""Settings específicas do SES.

Credenciais e timeout do transporte. O endpoint é fixo.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from functools import lru_cache

from sesmail.app.protocols.models import Credentials

SES_ENDPOINT: str = "https://email.us-east-1.amazonaws.com"
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 30.0


@dataclass(frozen=True)
class SESSettings:
    """Configurações do cliente SES.

    Attributes:
        access_key_id: Access key id AWS (público)
        secret_access_key: Secret AWS usado como chave do HMAC
        request_timeout_seconds: Timeout para requisições HTTP
    """

    access_key_id: str = ""
    secret_access_key: str = ""
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    @property
    def credentials(self) -> Credentials:
        """Par de credenciais para assinatura."""
        return Credentials(
            access_key_id=self.access_key_id,
            secret_access_key=self.secret_access_key,
        )

    def validate(self) -> list[str]:
        """Valida configurações mínimas do SES.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.access_key_id:
            errors.append("SES_ACCESS_KEY_ID não configurado")

        if not self.secret_access_key:
            errors.append("SES_SECRET_ACCESS_KEY não configurado")

        if not math.isfinite(self.request_timeout_seconds):
            errors.append("SES_REQUEST_TIMEOUT_SECONDS deve ser um número finito")
        elif self.request_timeout_seconds <= 0:
            errors.append("SES_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_timeout(raw: str | None) -> float:
    """Converte SES_REQUEST_TIMEOUT_SECONDS para float.

    Raises:
        ValueError: Valor não numérico, com o nome da variável na mensagem.
    """
    if raw is None or not raw.strip():
        return DEFAULT_REQUEST_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(
            f"SES_REQUEST_TIMEOUT_SECONDS inválido: {raw!r} (esperado número em segundos)"
        ) from exc


def _load_from_env() -> SESSettings:
    """Carrega SESSettings a partir de variáveis de ambiente.

    Raises:
        ValueError: SES_REQUEST_TIMEOUT_SECONDS não numérico.
    """
    return SESSettings(
        access_key_id=os.getenv("SES_ACCESS_KEY_ID", ""),
        secret_access_key=os.getenv("SES_SECRET_ACCESS_KEY", ""),
        request_timeout_seconds=_parse_timeout(os.getenv("SES_REQUEST_TIMEOUT_SECONDS")),
    )


@lru_cache(maxsize=1)
def get_ses_settings() -> SESSettings:
    """Retorna instância cacheada de SESSettings."""
    return _load_from_env()
