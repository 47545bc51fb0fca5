"""Payload builders por canal."""
