"""Helpers that turn generated outfits into Telegram messages."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Sequence

from aiogram import html
from aiogram.types import BufferedInputFile, Message

from moodstylist.services.models import Outfit

logger = logging.getLogger(__name__)


def decode_data_url(url: str) -> bytes | None:
    """Return the bytes of a base64 ``data:`` URL, or ``None`` for other URLs."""

    if not url.startswith("data:") or "," not in url:
        return None
    header, encoded = url.split(",", 1)
    if not header.endswith(";base64"):
        return None
    try:
        return base64.b64decode(encoded, validate=True)
    except (ValueError, binascii.Error):
        return None


def format_outfit(outfit: Outfit) -> str:
    """HTML body of an outfit card."""

    return (
        f"{html.bold(html.quote(outfit.title))}\n\n"
        f"{html.quote(outfit.description)}\n\n"
        f"✨ {html.bold('STYLING TIPS')}\n"
        f"{html.quote(outfit.tips)}"
    )


async def send_outfits(message: Message, outfits: Sequence[Outfit]) -> None:
    """Send each outfit as an optional photo followed by its description."""

    for outfit in outfits:
        if outfit.image_url:
            image_bytes = decode_data_url(outfit.image_url)
            photo = (
                BufferedInputFile(image_bytes, filename="outfit.png")
                if image_bytes is not None
                else outfit.image_url
            )
            try:
                await message.answer_photo(photo, caption=html.quote(outfit.title))
            except Exception:
                logger.exception("Failed to send image for outfit %r", outfit.title)
        await message.answer(format_outfit(outfit))
