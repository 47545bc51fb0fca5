"""Assinatura AWS3-HTTPS (HMAC-SHA256 sobre o header Date)."""

from __future__ import annotations

import base64
import hashlib
import hmac
from datetime import UTC, datetime
from email.utils import format_datetime
from typing import TYPE_CHECKING

from sesmail.app.protocols.models import SignedRequest

if TYPE_CHECKING:
    from sesmail.app.protocols.models import Credentials

AUTH_SCHEME = "AWS3-HTTPS"
SIGNING_ALGORITHM = "HmacSHA256"


def format_request_date(moment: datetime) -> str:
    """Formata instante como data RFC 1123 em UTC com offset numérico.

    Datetimes naive são tratados como UTC. Nomes de dia/mês não dependem
    do locale do processo.

    Args:
        moment: Instante a formatar

    Returns:
        Data no formato "Tue, 25 May 2010 21:20:27 +0000"
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC).replace(microsecond=0)
    return format_datetime(moment)


def compute_signature(date: str, secret_access_key: str) -> str:
    """Calcula HMAC-SHA256 da data com o secret e codifica em base64.

    Args:
        date: Data canônica (mesma string enviada no header Date)
        secret_access_key: Chave secreta AWS

    Returns:
        Assinatura em base64 padrão
    """
    digest = hmac.new(
        secret_access_key.encode("utf-8"),
        date.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def build_authorization_header(access_key_id: str, signature: str) -> str:
    """Monta valor do header X-Amzn-Authorization."""
    return (
        f"{AUTH_SCHEME} AWSAccessKeyId={access_key_id}, "
        f"Algorithm={SIGNING_ALGORITHM}, Signature={signature}"
    )


def sign_request(moment: datetime, credentials: Credentials) -> SignedRequest:
    """Assina uma requisição a partir de um único instante capturado.

    A mesma string de data alimenta a assinatura e o header Date.
    """
    date = format_request_date(moment)
    signature = compute_signature(date, credentials.secret_access_key)
    return SignedRequest(
        date=date,
        signature=signature,
        authorization=build_authorization_header(credentials.access_key_id, signature),
    )
