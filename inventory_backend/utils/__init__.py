"""Shared helpers: logging setup, constants and the error taxonomy."""
