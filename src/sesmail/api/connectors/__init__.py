"""Conectores para APIs externas."""
