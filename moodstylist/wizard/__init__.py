"""Client-side selection wizard."""

from .client import StylistAPIClient, StylistAPIError
from .state_machine import (
    GenerationInProgressError,
    SelectionWizard,
    WizardStateError,
    WizardStep,
)

__all__ = [
    "GenerationInProgressError",
    "SelectionWizard",
    "StylistAPIClient",
    "StylistAPIError",
    "WizardStateError",
    "WizardStep",
]
