"""Transporte httpx em memória que registra as requisições recebidas."""

from __future__ import annotations

from collections.abc import Callable
from threading import Lock

import httpx


class RecordingTransport(httpx.MockTransport):
    """MockTransport que guarda cada requisição para inspeção.

    Args:
        handler: Função que recebe a requisição e devolve a resposta
            (ou levanta um httpx.TransportError para simular falha de rede).
    """

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self._lock = Lock()
        super().__init__(self._record(handler))

    def _record(
        self, handler: Callable[[httpx.Request], httpx.Response]
    ) -> Callable[[httpx.Request], httpx.Response]:
        def wrapped(request: httpx.Request) -> httpx.Response:
            with self._lock:
                self.requests.append(request)
            return handler(request)

        return wrapped

    @property
    def call_count(self) -> int:
        return len(self.requests)


def responding(status_code: int, text: str) -> RecordingTransport:
    """Transporte que sempre responde com o status e corpo dados."""
    return RecordingTransport(lambda request: httpx.Response(status_code, text=text))


def failing_to_connect() -> RecordingTransport:
    """Transporte que simula conexão recusada."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return RecordingTransport(handler)


def responding_with_corrupt_gzip() -> RecordingTransport:
    """Transporte que responde 200 com Content-Encoding gzip e corpo inválido."""
    return RecordingTransport(
        lambda request: httpx.Response(
            200, headers={"Content-Encoding": "gzip"}, content=b"notgzip"
        )
    )
