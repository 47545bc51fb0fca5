"""Testes para SESClient."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from urllib.parse import parse_qs

import httpx
import pytest

from sesmail import SESClient
from sesmail.api.connectors.ses import SESHttpClient
from sesmail.app.observability import get_correlation_id
from sesmail.app.protocols.models import Credentials, Email
from sesmail.config.settings import SESSettings
from sesmail.utils.errors import SESRemoteRejectionError, SESTransportError
from tests.fakes.fake_clock import FixedClock
from tests.fakes.fake_ses_transport import (
    RecordingTransport,
    failing_to_connect,
    responding,
)


class FakeHttpClient:
    """Transporte fake que registra parâmetros recebidos."""

    def __init__(self, result: str = "<ok/>") -> None:
        self._result = result
        self.calls: list[tuple[str, dict[str, str], Credentials]] = []

    def post(self, params: dict[str, str], credentials: Credentials) -> str:
        self.calls.append(("POST", params, credentials))
        return self._result

    def get(self, params: dict[str, str], credentials: Credentials) -> str:
        self.calls.append(("GET", params, credentials))
        return self._result


def _ses_client(credentials: Credentials, transport: httpx.BaseTransport) -> SESClient:
    return SESClient(
        credentials,
        http_client=SESHttpClient(transport=transport, clock=FixedClock()),
    )


class TestSESClientSend:
    """Testes para send (POST)."""

    def test_send_builds_params_and_posts(
        self, credentials: Credentials, email: Email
    ) -> None:
        """Parâmetros incluem AWSAccessKeyId e seguem via POST."""
        http_client = FakeHttpClient()
        client = SESClient(credentials, http_client=http_client)

        assert client.send(email) == "<ok/>"

        method, params, used_credentials = http_client.calls[0]
        assert method == "POST"
        assert params["AWSAccessKeyId"] == credentials.access_key_id
        assert params["Message.Body.Text.Data"] == email.body
        assert params["Message.Body.Html.Data"] == email.html_body
        assert used_credentials is credentials

    def test_send_via_get(self, credentials: Credentials, email: Email) -> None:
        """send_via_get usa a variante GET."""
        http_client = FakeHttpClient()
        SESClient(credentials, http_client=http_client).send_via_get(email)
        assert http_client.calls[0][0] == "GET"

    def test_success_end_to_end(self, credentials: Credentials, email: Email) -> None:
        """Status 200 com '<ok/>' devolve '<ok/>'."""
        client = _ses_client(credentials, responding(200, "<ok/>"))
        assert client.send(email) == "<ok/>"

    def test_rejection_end_to_end(self, credentials: Credentials, email: Email) -> None:
        """Status 403 propaga SESRemoteRejectionError."""
        client = _ses_client(credentials, responding(403, "AccessDenied"))
        with pytest.raises(SESRemoteRejectionError, match="403.*AccessDenied"):
            client.send(email)

    def test_transport_failure_end_to_end(
        self, credentials: Credentials, email: Email
    ) -> None:
        """Falha de conexão propaga após uma tentativa."""
        transport = failing_to_connect()
        client = _ses_client(credentials, transport)

        with pytest.raises(SESTransportError):
            client.send(email)
        assert transport.call_count == 1

    def test_email_without_bodies_is_sent(self, credentials: Credentials) -> None:
        """Email sem corpo algum é enviado; o SES decide."""
        http_client = FakeHttpClient()
        email = Email(to="a@example.com", sender="b@example.com", subject="vazio")
        SESClient(credentials, http_client=http_client).send(email)

        params = http_client.calls[0][1]
        assert "Message.Body.Text.Data" not in params
        assert "Message.Body.Html.Data" not in params


class TestSESClientConcurrency:
    """Chamadas concorrentes compartilhando uma instância."""

    def test_concurrent_calls_get_independent_responses(
        self, credentials: Credentials
    ) -> None:
        """Cada chamada recebe a resposta do próprio destinatário."""

        def echo_recipient(request: httpx.Request) -> httpx.Response:
            params = parse_qs(request.content.decode())
            return httpx.Response(
                200, text=f"<ok to='{params['Destination.ToAddresses.member.1'][0]}'/>"
            )

        transport = RecordingTransport(echo_recipient)
        client = _ses_client(credentials, transport)
        recipients = [f"user{i}@example.com" for i in range(40)]

        def send(recipient: str) -> str:
            return client.send(
                Email(to=recipient, sender="noreply@example.com", subject="s", body="b")
            )

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(send, recipients))

        assert results == [f"<ok to='{recipient}'/>" for recipient in recipients]
        assert transport.call_count == len(recipients)


class TestSESClientFromSettings:
    """Testes para SESClient.from_settings."""

    def test_uses_settings_credentials(self) -> None:
        """Credenciais vêm de SESSettings."""
        settings = SESSettings(access_key_id="AKID", secret_access_key="s3cr3t")
        client = SESClient.from_settings(settings)
        assert client.credentials == Credentials("AKID", "s3cr3t")

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Sem settings explícitas, carrega do ambiente."""
        monkeypatch.setenv("SES_ACCESS_KEY_ID", "ENVKEY")
        monkeypatch.setenv("SES_SECRET_ACCESS_KEY", "envsecret")
        client = SESClient.from_settings(transport=responding(200, "<ok/>"))

        assert client.credentials.access_key_id == "ENVKEY"
        result = client.send(Email(to="a@example.com", sender="b@example.com", subject="s"))
        assert result == "<ok/>"


class CorrelationRecordingHttpClient(FakeHttpClient):
    """Registra o correlation_id ativo durante cada envio."""

    def __init__(self) -> None:
        super().__init__()
        self.correlation_ids: list[str] = []

    def post(self, params: dict[str, str], credentials: Credentials) -> str:
        self.correlation_ids.append(get_correlation_id())
        return super().post(params, credentials)

    def get(self, params: dict[str, str], credentials: Credentials) -> str:
        self.correlation_ids.append(get_correlation_id())
        return super().get(params, credentials)


class TestSESClientCorrelationId:
    """Cada envio roda com um correlation_id próprio."""

    def test_each_send_gets_fresh_id(self, credentials: Credentials, email: Email) -> None:
        """Envios distintos recebem ids distintos e não vazios."""
        http_client = CorrelationRecordingHttpClient()
        client = SESClient(credentials, http_client=http_client)

        client.send(email)
        client.send_via_get(email)

        first, second = http_client.correlation_ids
        assert first
        assert second
        assert first != second

    def test_id_reset_after_send(self, credentials: Credentials, email: Email) -> None:
        """Fora do envio o contexto volta a ficar vazio."""
        SESClient(credentials, http_client=CorrelationRecordingHttpClient()).send(email)
        assert get_correlation_id() == ""

    def test_id_reset_after_failure(self, credentials: Credentials, email: Email) -> None:
        """Mesmo com erro, o id não vaza para fora do envio."""
        client = _ses_client(credentials, responding(403, "AccessDenied"))
        with pytest.raises(SESRemoteRejectionError):
            client.send(email)
        assert get_correlation_id() == ""

    def test_transport_error_logged_with_send_id(
        self, credentials: Credentials, email: Email, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Records emitidos durante o envio enxergam o id do envio."""
        captured: list[str] = []

        class _CaptureFilter(logging.Filter):
            def filter(self, record: logging.LogRecord) -> bool:
                captured.append(get_correlation_id())
                return True

        capture = _CaptureFilter()
        caplog.handler.addFilter(capture)
        try:
            with caplog.at_level(logging.WARNING), pytest.raises(SESTransportError):
                _ses_client(credentials, failing_to_connect()).send(email)
        finally:
            caplog.handler.removeFilter(capture)

        assert captured
        assert captured[0] != ""
