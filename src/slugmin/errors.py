# src/slugmin/errors.py
from __future__ import annotations


class SlugminError(Exception):
    """Base exception for all slugmin errors."""

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigError(SlugminError):
    """Raised when config is invalid."""


class InputError(SlugminError):
    """Raised when the command-line input cannot be read."""
