"""Exceções utilitárias compartilhadas."""

from .exceptions import SESError, SESRemoteRejectionError, SESTransportError

__all__ = [
    "SESError",
    "SESRemoteRejectionError",
    "SESTransportError",
]
