"""Errors raised by pagegen."""

from __future__ import annotations


class PageGenerationError(RuntimeError):
    """Raised when a page cannot be generated from the given inputs or config."""
