"""Tests for the outfit prompt builder."""

from moodstylist.services.models import Gender, Mood, Selection
from moodstylist.services.prompt_builder import PromptBuilder


def test_prompt_builder_includes_selection() -> None:
    builder = PromptBuilder()

    prompt = builder.build_outfit_prompt(Selection(mood=Mood.EDGY, gender=Gender.FEMALE))

    assert "Create 3 outfit suggestions for a female person who wants to feel edgy." in prompt
    assert "Classic Edgy Look" in prompt
    assert "exactly 3 outfits" in prompt


def test_prompt_builder_describes_required_fields() -> None:
    prompt = PromptBuilder().build_outfit_prompt(Selection(mood=Mood.CASUAL, gender=Gender.UNISEX))

    for key in ('"title"', '"description"', '"tips"', '"imagePrompt"'):
        assert key in prompt
    assert "professional fashion photography" in prompt
