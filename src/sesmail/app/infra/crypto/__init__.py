"""Módulo de criptografia para assinatura de requisições SES."""

from .signature import (
    AUTH_SCHEME,
    SIGNING_ALGORITHM,
    build_authorization_header,
    compute_signature,
    format_request_date,
    sign_request,
)

__all__ = [
    "AUTH_SCHEME",
    "SIGNING_ALGORITHM",
    "build_authorization_header",
    "compute_signature",
    "format_request_date",
    "sign_request",
]
