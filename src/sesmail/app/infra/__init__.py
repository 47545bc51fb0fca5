"""Infraestrutura concreta (IO, relógio, criptografia)."""
