"""Protocolos e contratos do core da aplicação."""

from .clock import ClockProtocol
from .http_client import SESHttpClientProtocol
from .models import Credentials, Email, SignedRequest
from .payload_builder import PayloadBuilderProtocol

__all__ = [
    "ClockProtocol",
    "Credentials",
    "Email",
    "PayloadBuilderProtocol",
    "SESHttpClientProtocol",
    "SignedRequest",
]
