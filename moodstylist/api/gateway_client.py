"""Async wrapper around the OpenAI-compatible AI gateway endpoints."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from moodstylist.config.settings import Settings

logger = logging.getLogger(__name__)


class GatewayRequestError(RuntimeError):
    """Raised when the AI gateway fails or responds with an error status code."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class GatewayClient:
    """Provides the text and image generation calls used by the orchestrator."""

    def __init__(self, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        base_url = settings.gateway_base_url.rstrip("/")
        self._settings = settings
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=settings.gateway_timeout,
            headers={
                "Authorization": f"Bearer {settings.gateway_api_key}",
            },
            transport=transport,
        )
        self._openai = AsyncOpenAI(
            api_key=settings.gateway_api_key,
            base_url=base_url,
            timeout=settings.gateway_timeout,
            max_retries=0,
            http_client=httpx.AsyncClient(transport=transport) if transport is not None else None,
        )

    async def close(self) -> None:
        """Close the underlying HTTP clients."""

        await self._client.aclose()
        await self._openai.close()

    async def _request_json(
        self,
        method: str,
        endpoint: str,
        *,
        json_body: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        try:
            response = await self._client.request(method, endpoint, json=json_body)
            response.raise_for_status()
            if not response.content:
                return {}
            return response.json()
        except httpx.TimeoutException as exc:
            raise GatewayRequestError("Timed out waiting for the AI gateway.") from exc
        except httpx.HTTPStatusError as exc:
            raise GatewayRequestError(
                f"AI gateway returned {exc.response.status_code}",
                status_code=exc.response.status_code,
                body=exc.response.text,
            ) from exc
        except httpx.HTTPError as exc:
            raise GatewayRequestError(f"AI gateway request failed: {exc}") from exc
        except ValueError as exc:
            raise GatewayRequestError("AI gateway returned a non-JSON body.") from exc

    async def generate_text(self, prompt: str) -> str:
        """Send a single user message to the text model and return the reply content."""

        try:
            completion = await self._openai.chat.completions.create(
                model=self._settings.gateway_text_model,
                messages=[{"role": "user", "content": prompt}],
            )
        except APIStatusError as exc:
            raise GatewayRequestError(
                f"AI gateway returned {exc.status_code}",
                status_code=exc.status_code,
                body=exc.response.text,
            ) from exc
        except APIConnectionError as exc:
            raise GatewayRequestError("AI gateway is unreachable.") from exc

        if not completion.choices:
            return ""
        return completion.choices[0].message.content or ""

    async def generate_image(self, prompt: str) -> str | None:
        """Ask the image model to illustrate ``prompt`` and return the image URL, if any."""

        payload = {
            "model": self._settings.gateway_image_model,
            "messages": [{"role": "user", "content": prompt}],
            "modalities": ["image", "text"],
        }
        result = await self._request_json("POST", "/chat/completions", json_body=payload)
        return self.image_url_from_payload(result)

    @staticmethod
    def image_url_from_payload(payload: Mapping[str, Any]) -> str | None:
        """Extract the generated image URL from a chat completions response."""

        choices = payload.get("choices") or []
        if not choices or not isinstance(choices[0], Mapping):
            logger.warning("AI gateway image response has no choices")
            return None
        message = choices[0].get("message") or {}

        images = message.get("images") or []
        if images and isinstance(images[0], Mapping):
            image_info = images[0].get("image_url") or {}
            if isinstance(image_info, Mapping) and image_info.get("url"):
                return image_info["url"]

        content = message.get("content")
        if isinstance(content, str) and content.startswith("data:"):
            return content
        if isinstance(content, list):
            for part in content:
                if (
                    isinstance(part, Mapping)
                    and part.get("type") == "image_url"
                    and isinstance(part.get("image_url"), Mapping)
                    and part["image_url"].get("url")
                ):
                    return part["image_url"]["url"]

        logger.warning("AI gateway image response contains no image_url field")
        return None
