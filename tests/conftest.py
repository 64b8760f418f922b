"""Shared fixtures for the stylist test-suite."""

from __future__ import annotations

import json
from typing import Callable

import pytest

from moodstylist.config.settings import Settings


def _outfit_payload(index: int) -> dict[str, str]:
    return {
        "title": f"Look {index}",
        "description": f"Linen shirt, chinos and loafers, variation {index}",
        "tips": f"Roll the sleeves twice ({index})",
        "imagePrompt": f"Prompt {index}",
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(
        gateway_api_key="test-key",
        gateway_base_url="https://gateway.test/v1",
    )


@pytest.fixture
def make_reply() -> Callable[..., str]:
    """Build a model reply that wraps an outfit array in prose and a code fence."""

    def _make(count: int = 3) -> str:
        outfits = [_outfit_payload(index) for index in range(1, count + 1)]
        return (
            "Here are three looks for you!\n"
            f"```json\n{json.dumps(outfits, indent=2)}\n```\n"
            "Have fun styling them."
        )

    return _make
