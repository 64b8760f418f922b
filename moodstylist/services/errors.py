"""Errors raised while generating outfits."""

from __future__ import annotations


class OutfitGenerationError(RuntimeError):
    """Base class for failures that abort a generation request."""


class ConfigurationError(OutfitGenerationError):
    """Raised when the AI gateway credential is missing."""


class UpstreamTextError(OutfitGenerationError):
    """Raised when the text model responds with a non-success status."""


class ParseError(OutfitGenerationError):
    """Raised when the model reply does not contain a usable JSON array."""


class ImageGenerationError(RuntimeError):
    """Raised for a single failed illustration; never aborts the request."""
