"""Three-step wizard that collects a mood and a style before requesting outfits."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Protocol

from moodstylist.services.models import Gender, Mood, Outfit

logger = logging.getLogger(__name__)

READY_MESSAGE = "Your outfit ideas are ready!"
FAILED_MESSAGE = "Failed to generate outfits. Please try again."


class WizardStep(str, Enum):
    """Wizard stages, in the order the user goes through them."""

    MOOD = "mood"
    GENDER = "gender"
    RESULTS = "results"


class WizardStateError(RuntimeError):
    """Raised when a selection arrives at the wrong step."""


class GenerationInProgressError(WizardStateError):
    """Raised when a generation is requested while another one is running."""


class OutfitSource(Protocol):
    async def generate(self, gender: Gender, mood: Mood) -> list[Outfit]: ...


class Notifier(Protocol):
    """Short-lived user-facing notifications."""

    async def success(self, text: str) -> None: ...

    async def error(self, text: str) -> None: ...


class LoggingNotifier:
    """Notifier used when no user-facing channel is attached."""

    async def success(self, text: str) -> None:
        logger.info(text)

    async def error(self, text: str) -> None:
        logger.warning(text)


class SelectionWizard:
    """Tracks one user's progress through mood -> gender -> results.

    Every generation takes a fresh token; a completion whose token is no
    longer current (because of a reset) leaves the wizard untouched.
    """

    def __init__(
        self,
        source: OutfitSource,
        notifier: Notifier | None = None,
        *,
        transition_delay: float = 0.3,
    ) -> None:
        self._source = source
        self._notifier = notifier or LoggingNotifier()
        self._transition_delay = transition_delay
        self._token = 0

        self.step = WizardStep.MOOD
        self.mood: Mood | None = None
        self.gender: Gender | None = None
        self.outfits: list[Outfit] = []
        self.loading = False

    async def select_mood(self, mood: Mood) -> None:
        """Record the mood and move on to the style step after a short pause."""

        if self.step is not WizardStep.MOOD:
            raise WizardStateError(f"Cannot select a mood during the {self.step.value} step")

        self.mood = mood
        token = self._token
        if self._transition_delay > 0:
            await asyncio.sleep(self._transition_delay)
        if token == self._token and self.step is WizardStep.MOOD:
            self.step = WizardStep.GENDER

    async def select_gender(self, gender: Gender) -> list[Outfit]:
        """Record the style and immediately generate outfits for both selections."""

        if self.step is not WizardStep.GENDER or self.mood is None:
            raise WizardStateError(f"Cannot select a style during the {self.step.value} step")
        if self.loading:
            raise GenerationInProgressError("Outfits are already being generated")

        self.gender = gender
        self.step = WizardStep.RESULTS
        return await self.generate(gender, self.mood)

    async def generate(self, gender: Gender, mood: Mood) -> list[Outfit]:
        """Request outfits for the given selections.

        Returns the stored outfits, or an empty list when the request failed
        or was superseded by a reset.
        """

        if self.loading:
            raise GenerationInProgressError("Outfits are already being generated")

        self._token += 1
        token = self._token
        self.loading = True
        self.outfits = []

        outfits: list[Outfit] = []
        error: Exception | None = None
        try:
            outfits = await self._source.generate(gender, mood)
        except Exception as exc:
            error = exc
        finally:
            if token == self._token:
                self.loading = False

        if token != self._token:
            logger.info("Ignoring result of superseded generation request #%d", token)
            return []

        if error is not None:
            logger.warning("Outfit generation failed: %s", error)
            self.step = WizardStep.GENDER
            await self._notifier.error(FAILED_MESSAGE)
            return []

        self.outfits = list(outfits)
        await self._notifier.success(READY_MESSAGE)
        return self.outfits

    def reset(self) -> None:
        """Clear both selections and results and return to the mood step."""

        self._token += 1
        self.step = WizardStep.MOOD
        self.mood = None
        self.gender = None
        self.outfits = []
        self.loading = False
