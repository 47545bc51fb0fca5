"""Envia um email via SES a partir da linha de comando.

Uso:
    SES_ACCESS_KEY_ID=... SES_SECRET_ACCESS_KEY=... \
        sesmail --from noreply@exemplo.com --to cliente@exemplo.com \
        --subject "Olá" --text "Corpo em texto"

Credenciais vêm do ambiente (SES_ACCESS_KEY_ID, SES_SECRET_ACCESS_KEY).
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

from sesmail.app.observability import get_correlation_id
from sesmail.app.protocols.models import Email
from sesmail.app.use_cases.send_email import SESClient
from sesmail.config.logging import configure_logging
from sesmail.config.settings import VALID_LOG_LEVELS, get_base_settings, get_ses_settings
from sesmail.utils.errors import SESError

if TYPE_CHECKING:
    from collections.abc import Sequence

    import httpx

EXIT_OK = 0
EXIT_SEND_FAILED = 1
EXIT_INVALID_SETTINGS = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sesmail",
        description="Envia um email via Amazon SES (SendEmail).",
    )
    parser.add_argument("--from", dest="sender", required=True, help="Remetente.")
    parser.add_argument("--to", required=True, help="Destinatário único.")
    parser.add_argument("--subject", required=True, help="Assunto.")
    parser.add_argument("--text", default="", help="Corpo em texto puro.")
    parser.add_argument("--html", default="", help="Corpo em HTML.")
    parser.add_argument(
        "--method",
        choices=("post", "get"),
        default="post",
        help="Variante HTTP. Padrao: post.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=sorted(VALID_LOG_LEVELS),
        help="Nível de log. Se omitido, usa LOG_LEVEL do ambiente.",
    )
    return parser.parse_args(argv)


def main(
    argv: Sequence[str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> int:
    args = parse_args(argv)
    base = get_base_settings()
    try:
        ses = get_ses_settings()
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_INVALID_SETTINGS

    errors = base.validate() + ses.validate()
    if errors:
        for error in errors:
            print(error, file=sys.stderr)
        return EXIT_INVALID_SETTINGS

    configure_logging(
        level=args.log_level or base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )

    client = SESClient.from_settings(ses, transport=transport)
    email = Email(
        to=args.to,
        sender=args.sender,
        subject=args.subject,
        body=args.text,
        html_body=args.html,
    )

    try:
        if args.method == "get":
            result = client.send_via_get(email)
        else:
            result = client.send(email)
    except SESError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_SEND_FAILED

    print(result)
    return EXIT_OK
