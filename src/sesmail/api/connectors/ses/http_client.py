"""Cliente HTTP especializado para a API de query do Amazon SES.

Estende HttpClient genérico com comportamentos específicos do SES:
- Assinatura AWS3-HTTPS (HMAC-SHA256 sobre o header Date)
- Envio POST (form-urlencoded) ou GET (query string)
- Status diferente de 200 vira SESRemoteRejectionError com status e corpo
- Logging estruturado sem PII (endereços, secrets)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from sesmail.api.connectors.ses.ses_logging import log_ses_rejection, log_success
from sesmail.app.infra.clock import SystemClock
from sesmail.app.infra.crypto import sign_request
from sesmail.app.infra.http import HttpClient, HttpClientConfig
from sesmail.config.settings import SES_ENDPOINT
from sesmail.utils.errors import SESRemoteRejectionError

if TYPE_CHECKING:
    import httpx

    from sesmail.app.protocols.clock import ClockProtocol
    from sesmail.app.protocols.models import Credentials, SignedRequest
    from sesmail.config.settings import SESSettings

logger: logging.Logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
DATE_HEADER = "Date"
AUTHORIZATION_HEADER = "X-Amzn-Authorization"


class SESHttpClient(HttpClient):
    """Transporte assinado para o endpoint fixo do SES.

    Sem estado mutável: configuração, transporte e relógio são definidos
    na construção, então uma instância pode ser compartilhada entre threads.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
        clock: ClockProtocol | None = None,
    ) -> None:
        """Inicializa cliente SES.

        Args:
            config: Configuração HTTP base
            transport: Transporte httpx injetável
            clock: Fonte de tempo injetável (padrão: relógio do sistema em UTC)
        """
        super().__init__(config, transport)
        self._clock = clock or SystemClock()

    def post(self, params: dict[str, str], credentials: Credentials) -> str:
        """Envia parâmetros no corpo form-urlencoded de um POST.

        Args:
            params: Parâmetros do protocolo (Action, Source, ...)
            credentials: Credenciais para assinatura

        Returns:
            Corpo da resposta, sem modificação

        Raises:
            SESTransportError: Falha de conexão, DNS ou timeout
            SESRemoteRejectionError: Status diferente de 200
        """
        signed = self.sign(credentials)
        headers = self._build_headers(signed)
        headers["Content-Type"] = FORM_CONTENT_TYPE
        response = self.request(
            "POST",
            SES_ENDPOINT,
            headers=headers,
            content=urlencode(params),
        )
        return self._process_ses_response(response, "POST")

    def get(self, params: dict[str, str], credentials: Credentials) -> str:
        """Envia parâmetros na query string de um GET.

        Mesmos headers de assinatura do POST, sem corpo.

        Raises:
            SESTransportError: Falha de conexão, DNS ou timeout
            SESRemoteRejectionError: Status diferente de 200
        """
        signed = self.sign(credentials)
        response = self.request(
            "GET",
            f"{SES_ENDPOINT}?{urlencode(params)}",
            headers=self._build_headers(signed),
        )
        return self._process_ses_response(response, "GET")

    def sign(self, credentials: Credentials) -> SignedRequest:
        """Captura o instante atual uma única vez e assina."""
        return sign_request(self._clock.now(), credentials)

    @staticmethod
    def _build_headers(signed: SignedRequest) -> dict[str, str]:
        return {
            DATE_HEADER: signed.date,
            AUTHORIZATION_HEADER: signed.authorization,
        }

    @staticmethod
    def _process_ses_response(response: httpx.Response, method: str) -> str:
        """Classifica a resposta: 200 devolve o corpo, o resto vira erro."""
        body = response.text
        if response.status_code != 200:
            error = SESRemoteRejectionError(response.status_code, body)
            log_ses_rejection(error, method)
            raise error

        log_success(method, response.status_code)
        return body


def create_ses_http_client(
    settings: SESSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> SESHttpClient:
    """Factory para criar cliente SES com config padrão.

    Args:
        settings: SESSettings opcional. Se None, carrega do ambiente.
        transport: Transporte httpx opcional.

    Returns:
        Cliente HTTP configurado para SES.
    """
    from sesmail.config.settings import get_ses_settings

    ses = settings or get_ses_settings()
    config = HttpClientConfig(timeout_seconds=ses.request_timeout_seconds)
    return SESHttpClient(config=config, transport=transport)
