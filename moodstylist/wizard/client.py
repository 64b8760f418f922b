"""HTTP client for the outfit generation endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from moodstylist.services.models import Gender, Mood, Outfit

logger = logging.getLogger(__name__)


class StylistAPIError(RuntimeError):
    """Raised when the outfit endpoint fails or returns an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class StylistAPIClient:
    """Calls the orchestrator on behalf of the wizard."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float | None = 300.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self) -> None:
        """Close the underlying HTTP client."""

        await self._client.aclose()

    async def generate(self, gender: Gender, mood: Mood) -> list[Outfit]:
        """Request three outfits for the selections."""

        try:
            response = await self._client.post(
                self._url,
                json={"gender": gender.value, "mood": mood.value},
            )
        except httpx.HTTPError as exc:
            raise StylistAPIError(f"Outfit service is unreachable: {exc}") from exc

        payload = self._json_or_empty(response)
        if response.is_error or "error" in payload:
            message = payload.get("error") or f"Outfit service returned {response.status_code}"
            raise StylistAPIError(str(message), status_code=response.status_code)

        try:
            return [Outfit.model_validate(item) for item in payload.get("outfits") or []]
        except ValidationError as exc:
            raise StylistAPIError("Outfit service returned malformed outfits") from exc

    @staticmethod
    def _json_or_empty(response: httpx.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError:
            logger.warning("Outfit service returned a non-JSON body (status %s)", response.status_code)
            return {}
        return payload if isinstance(payload, dict) else {}
