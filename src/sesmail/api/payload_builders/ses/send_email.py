"""Builder de parâmetros para a ação SendEmail."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sesmail.app.protocols.models import Email

SEND_EMAIL_ACTION = "SendEmail"

PARAM_ACTION = "Action"
PARAM_SOURCE = "Source"
PARAM_TO = "Destination.ToAddresses.member.1"
PARAM_SUBJECT = "Message.Subject.Data"
PARAM_TEXT_BODY = "Message.Body.Text.Data"
PARAM_HTML_BODY = "Message.Body.Html.Data"
PARAM_ACCESS_KEY_ID = "AWSAccessKeyId"


def build_send_email_params(email: Email, access_key_id: str) -> dict[str, str]:
    """Monta os parâmetros de query do SendEmail.

    Corpo texto e HTML só entram quando não vazios. Nada é validado:
    o SES é a fonte de verdade para erros de entrada.

    Args:
        email: Email a enviar
        access_key_id: Access key id, exigido também como parâmetro

    Returns:
        Mapa nome do parâmetro -> valor
    """
    params = {
        PARAM_ACTION: SEND_EMAIL_ACTION,
        PARAM_SOURCE: email.sender,
        PARAM_TO: email.to,
        PARAM_SUBJECT: email.subject,
    }

    if email.body:
        params[PARAM_TEXT_BODY] = email.body

    if email.html_body:
        params[PARAM_HTML_BODY] = email.html_body

    params[PARAM_ACCESS_KEY_ID] = access_key_id
    return params


class SendEmailPayloadBuilder:
    """Builder para a ação SendEmail."""

    def build(self, email: Email, access_key_id: str) -> dict[str, str]:
        return build_send_email_params(email, access_key_id)
