"""Exceptions raised by the rendering engine."""

from __future__ import annotations


class RenderingError(Exception):
    """Base exception for rendering failures."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class UnknownTemplateError(RenderingError):
    """Raised when a template identifier is not in the registry."""

    def __init__(self, slug: str):
        super().__init__(f"Unknown template: {slug!r}")
        self.slug = slug


class InvalidResumeError(RenderingError):
    """Raised at the input boundary when a resume payload is unusable."""


class DocumentEncodingError(RenderingError):
    """Raised when serializing a document to bytes fails."""
