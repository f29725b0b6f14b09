"""Slugmin public API."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from slugmin.slug import slugify, slugify_filename

try:
    __version__ = version("slugmin")
except PackageNotFoundError:  # pragma: no cover - during source-only use
    __version__ = "unknown"

__all__ = ["__version__", "slugify", "slugify_filename"]
