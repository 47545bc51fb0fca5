"""Use case para envio de email via SES."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sesmail.api.connectors.ses import SESHttpClient, create_ses_http_client
from sesmail.api.payload_builders.ses import SendEmailPayloadBuilder
from sesmail.app.observability import reset_correlation_id, set_correlation_id

if TYPE_CHECKING:
    import httpx

    from sesmail.app.protocols.http_client import SESHttpClientProtocol
    from sesmail.app.protocols.models import Credentials, Email
    from sesmail.app.protocols.payload_builder import PayloadBuilderProtocol
    from sesmail.config.settings import SESSettings


class SESClient:
    """Orquestra build de parâmetros e envio assinado.

    Guarda apenas as credenciais imutáveis e dependências injetadas;
    chamadas concorrentes a partir de threads distintas são seguras.

    Example:
        >>> client = SESClient(Credentials("AKID", "secret"))
        >>> client.send(Email(to="a@x.com", sender="b@x.com", subject="Oi", body="..."))
    """

    def __init__(
        self,
        credentials: Credentials,
        http_client: SESHttpClientProtocol | None = None,
        builder: PayloadBuilderProtocol | None = None,
    ) -> None:
        self._credentials = credentials
        self._http_client = http_client or SESHttpClient()
        self._builder = builder or SendEmailPayloadBuilder()

    @classmethod
    def from_settings(
        cls,
        settings: SESSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> SESClient:
        """Cria cliente a partir de SESSettings (ambiente se None)."""
        from sesmail.config.settings import get_ses_settings

        ses = settings or get_ses_settings()
        return cls(
            credentials=ses.credentials,
            http_client=create_ses_http_client(ses, transport=transport),
        )

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    def send(self, email: Email) -> str:
        """Envia email via POST e devolve o corpo da resposta do SES.

        Roda com um correlation_id novo, visível nos logs do envio.

        Raises:
            SESTransportError: Falha de conexão, DNS ou timeout
            SESRemoteRejectionError: SES respondeu com status diferente de 200
        """
        params = self._builder.build(email, self._credentials.access_key_id)
        token = set_correlation_id()
        try:
            return self._http_client.post(params, self._credentials)
        finally:
            reset_correlation_id(token)

    def send_via_get(self, email: Email) -> str:
        """Mesmo que send(), com parâmetros na query string de um GET."""
        params = self._builder.build(email, self._credentials.access_key_id)
        token = set_correlation_id()
        try:
            return self._http_client.get(params, self._credentials)
        finally:
            reset_correlation_id(token)
