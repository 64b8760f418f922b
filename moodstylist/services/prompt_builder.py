"""Prompt construction for the outfit text model."""

from __future__ import annotations

from moodstylist.services.models import OUTFIT_COUNT, Selection


class PromptBuilder:
    """Builds the stylist instruction sent to the text model."""

    def build_outfit_prompt(self, selection: Selection, *, count: int = OUTFIT_COUNT) -> str:
        """Return the natural-language request for ``count`` outfits as a JSON array."""

        return "\n".join(
            [
                (
                    f"You are a professional fashion stylist. Create {count} outfit suggestions "
                    f"for a {selection.gender.value} person who wants to feel {selection.mood.value}."
                ),
                "",
                "For each outfit, provide:",
                f'1. A brief title (e.g., "Classic {selection.mood.label} Look")',
                (
                    "2. A detailed description of the outfit including specific items "
                    "(top, bottom, shoes, accessories)"
                ),
                "3. Style tips for pulling off this look",
                "4. An image prompt that will be used to generate a fashion image",
                "",
                (
                    f"Return the response as a JSON array with exactly {count} outfits. "
                    "Each outfit should have this structure:"
                ),
                "{",
                '  "title": "outfit title",',
                '  "description": "detailed outfit description",',
                '  "tips": "styling tips",',
                '  "imagePrompt": "detailed prompt for image generation of this outfit on a fashion model"',
                "}",
                "",
                (
                    "Make the image prompts very detailed and specific, describing the exact clothing "
                    "items, colors, textures, and styling. Always specify professional fashion "
                    "photography style."
                ),
            ]
        )
