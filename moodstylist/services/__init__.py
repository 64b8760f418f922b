"""Outfit generation services."""

from .errors import (
    ConfigurationError,
    OutfitGenerationError,
    ParseError,
    UpstreamTextError,
)
from .models import Gender, Mood, Outfit, Selection
from .outfit import OutfitOrchestrator

__all__ = [
    "ConfigurationError",
    "Gender",
    "Mood",
    "Outfit",
    "OutfitGenerationError",
    "OutfitOrchestrator",
    "ParseError",
    "Selection",
    "UpstreamTextError",
]
