"""Selections and outfit records exchanged between the wizard and the orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

OUTFIT_COUNT = 3


class Mood(str, Enum):
    """Style intent that drives the generation prompt."""

    CONFIDENT = "confident"
    RELAXED = "relaxed"
    ROMANTIC = "romantic"
    EDGY = "edgy"
    PROFESSIONAL = "professional"
    CASUAL = "casual"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_label(cls, text: str) -> Mood | None:
        """Map a keyboard label (case-insensitive) back to a mood."""

        try:
            return cls(text.strip().lower())
        except ValueError:
            return None


class Gender(str, Enum):
    """Style category the outfits are generated for."""

    MALE = "male"
    FEMALE = "female"
    UNISEX = "unisex"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_label(cls, text: str) -> Gender | None:
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class Selection:
    """The two choices a generation request is built from."""

    mood: Mood
    gender: Gender


class OutfitRequest(BaseModel):
    """Request body accepted by the generation endpoint."""

    gender: Gender
    mood: Mood

    def to_selection(self) -> Selection:
        return Selection(mood=self.mood, gender=self.gender)


class Outfit(BaseModel):
    """A single outfit suggestion.

    ``image_prompt`` is only used server-side to request the illustration and
    is never serialised back to the caller.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    tips: str = Field(min_length=1)
    image_prompt: str = Field(default="", alias="imagePrompt", exclude=True)
    image_url: str | None = Field(default=None, alias="imageUrl")

    def to_public(self) -> dict[str, Any]:
        """Return the camelCase payload sent to clients, without empty fields."""

        return self.model_dump(by_alias=True, exclude_none=True)
