"""Cliente HTTP base para conectores da camada API.

Cada chamada abre e fecha seu próprio httpx.Client: nenhuma conexão é
reaproveitada entre chamadas. Sem retry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

from sesmail.utils.errors import SESTransportError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP síncrono, uma conexão por chamada.

    Args:
        config: Configuração HTTP (timeout, headers padrão)
        transport: Transporte httpx injetável (ex.: httpx.MockTransport em testes)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: str | None = None,
    ) -> httpx.Response:
        """Executa uma única requisição; o corpo já vem lido.

        Raises:
            SESTransportError: Falha de conexão, DNS, timeout ou decodificação da resposta
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            with httpx.Client(
                transport=self._transport,
                timeout=self._config.timeout_seconds,
                verify=self._config.verify_ssl,
            ) as client:
                return client.request(
                    method,
                    url,
                    headers=merged_headers,
                    content=content,
                )
        except httpx.RequestError as exc:
            logger.warning(
                "http_transport_error",
                extra={"method": method, "error_type": type(exc).__name__},
            )
            raise SESTransportError(f"http error: {exc}", original=exc) from exc
