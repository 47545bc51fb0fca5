"""Payload builders para a API de query do SES."""

from .send_email import (
    PARAM_ACCESS_KEY_ID,
    PARAM_ACTION,
    PARAM_HTML_BODY,
    PARAM_SOURCE,
    PARAM_SUBJECT,
    PARAM_TEXT_BODY,
    PARAM_TO,
    SEND_EMAIL_ACTION,
    SendEmailPayloadBuilder,
    build_send_email_params,
)

__all__ = [
    "PARAM_ACCESS_KEY_ID",
    "PARAM_ACTION",
    "PARAM_HTML_BODY",
    "PARAM_SOURCE",
    "PARAM_SUBJECT",
    "PARAM_TEXT_BODY",
    "PARAM_TO",
    "SEND_EMAIL_ACTION",
    "SendEmailPayloadBuilder",
    "build_send_email_params",
]
