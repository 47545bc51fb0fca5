"""Modelos de domínio do envio via SES."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Credentials:
    """Par de credenciais AWS usado para assinar requisições.

    Imutável durante a vida do cliente. O secret nunca aparece no repr.
    """

    access_key_id: str
    secret_access_key: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class Email:
    """Descrição de um email com destinatário único.

    Nenhum campo é validado localmente: endereço malformado ou corpo vazio
    são encaminhados ao SES, que decide se rejeita.
    """

    to: str
    sender: str
    subject: str
    body: str = ""
    html_body: str = ""


@dataclass(frozen=True, slots=True)
class SignedRequest:
    """Requisição assinada, válida apenas para uma chamada.

    Attributes:
        date: Data canônica, enviada no header Date e usada como entrada da assinatura
        signature: HMAC-SHA256 em base64 calculado sobre `date`
        authorization: Valor do header X-Amzn-Authorization
    """

    date: str
    signature: str
    authorization: str
