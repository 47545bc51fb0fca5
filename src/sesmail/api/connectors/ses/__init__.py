"""Conector SES: transporte HTTP assinado."""

from .http_client import (
    AUTHORIZATION_HEADER,
    DATE_HEADER,
    FORM_CONTENT_TYPE,
    SESHttpClient,
    create_ses_http_client,
)

__all__ = [
    "AUTHORIZATION_HEADER",
    "DATE_HEADER",
    "FORM_CONTENT_TYPE",
    "SESHttpClient",
    "create_ses_http_client",
]
