"""Agregador de settings do sesmail.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from sesmail.config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)
from sesmail.config.settings.ses import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    SES_ENDPOINT,
    SESSettings,
    get_ses_settings,
)

__all__ = [
    # Constants
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "SES_ENDPOINT",
    "VALID_LOG_LEVELS",
    # Base
    "BaseSettings",
    "Environment",
    # SES
    "SESSettings",
    "get_base_settings",
    "get_ses_settings",
]
