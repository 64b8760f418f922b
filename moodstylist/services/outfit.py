"""Outfit orchestration pipeline that coordinates text and image generation."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from moodstylist.api.gateway_client import GatewayClient, GatewayRequestError
from moodstylist.config.settings import Settings
from moodstylist.services.errors import (
    ConfigurationError,
    ImageGenerationError,
    UpstreamTextError,
)
from moodstylist.services.models import Outfit, Selection
from moodstylist.services.parsing import parse_outfits
from moodstylist.services.prompt_builder import PromptBuilder

logger = logging.getLogger(__name__)


class OutfitOrchestrator:
    """Turns a mood and style selection into three illustrated outfit suggestions."""

    def __init__(
        self,
        settings: Settings,
        client: GatewayClient,
        prompt_builder: PromptBuilder | None = None,
    ) -> None:
        self._settings = settings
        self._client = client
        self._prompt_builder = prompt_builder or PromptBuilder()

    async def generate(self, selection: Selection) -> list[Outfit]:
        """
        Generate outfit suggestions and attach an illustration to each one.

        Only the configuration check, the text call and parsing can fail the
        request; illustrations are best-effort and missing ones are left out.
        """

        if not self._settings.gateway_api_key:
            raise ConfigurationError("AI_GATEWAY_API_KEY is not configured")

        prompt = self._prompt_builder.build_outfit_prompt(selection)
        try:
            reply = await self._client.generate_text(prompt)
        except GatewayRequestError as exc:
            logger.error("AI gateway error: status=%s body=%s", exc.status_code, exc.body or exc)
            raise UpstreamTextError("Failed to generate outfits") from exc

        outfits = parse_outfits(reply)
        logger.info(
            "Parsed %d outfits for mood=%s gender=%s",
            len(outfits),
            selection.mood.value,
            selection.gender.value,
        )
        return await self._attach_images(outfits)

    async def _attach_images(self, outfits: Sequence[Outfit]) -> list[Outfit]:
        results = await asyncio.gather(
            *(self._request_image(outfit) for outfit in outfits),
            return_exceptions=True,
        )

        illustrated: list[Outfit] = []
        for outfit, result in zip(outfits, results):
            if isinstance(result, Exception):
                logger.warning("Error generating image for %r: %s", outfit.title, result)
                illustrated.append(outfit)
                continue
            illustrated.append(outfit.model_copy(update={"image_url": result}))
        return illustrated

    async def _request_image(self, outfit: Outfit) -> str:
        if not outfit.image_prompt:
            raise ImageGenerationError("outfit has no image prompt")
        try:
            image_url = await self._client.generate_image(outfit.image_prompt)
        except GatewayRequestError as exc:
            raise ImageGenerationError(str(exc)) from exc
        if not image_url:
            raise ImageGenerationError("response contained no image")
        return image_url
