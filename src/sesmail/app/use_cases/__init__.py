"""Casos de uso."""

from .send_email import SESClient

__all__ = ["SESClient"]
