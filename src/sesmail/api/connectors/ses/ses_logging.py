"""Helpers de logging para API SES (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sesmail.utils.errors import SESRemoteRejectionError

logger = logging.getLogger(__name__)

# Corpo de erro do SES é XML curto; trunca para não inflar os logs
_MAX_LOGGED_BODY = 1000


def log_ses_rejection(error: SESRemoteRejectionError, method: str) -> None:
    """Loga rejeição do SES sem expor credenciais ou endereços."""
    body = error.body
    if len(body) > _MAX_LOGGED_BODY:
        body = body[:_MAX_LOGGED_BODY] + "..."
    logger.warning(
        "ses_remote_rejection",
        extra={
            "method": method,
            "status_code": error.status_code,
            "is_retryable": error.is_retryable,
            "response_text": body,
        },
    )


def log_success(method: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "ses_send_success",
        extra={
            "method": method,
            "status_code": status_code,
        },
    )
