"""Configuração centralizada de logging.

Uso:
    from sesmail.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="sesmail")

    logger = get_logger(__name__)
    logger.info("ses_send_success", extra={"status_code": 200})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sesmail.config.logging.filters import CorrelationIdFilter
from sesmail.config.logging.formatters import create_json_formatter
from sesmail.config.settings.base import VALID_LOG_LEVELS

if TYPE_CHECKING:
    from collections.abc import Callable

DEFAULT_SERVICE_NAME = "sesmail"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Deve ser chamada uma vez na inicialização (ex: no CLI). A biblioteca
    em si apenas emite logs via logging.getLogger(__name__).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)
