"""Start command handler."""

from __future__ import annotations

from aiogram import Router
from aiogram.filters import CommandStart
from aiogram.types import Message

from moodstylist.bot_service.context import BotContext
from moodstylist.bot_service.keyboards import MOOD_KEYBOARD


def setup(router: Router, context: BotContext) -> None:
    """Register /start handler."""

    @router.message(CommandStart())
    async def handle_start(message: Message) -> None:
        wizard = context.wizards.get(message.bot, message.chat.id)
        wizard.reset()
        await message.answer(
            "Hi! I'm your AI Mood Stylist. Tell me how you want to feel today "
            "and I'll put together three looks for you.",
            reply_markup=MOOD_KEYBOARD,
        )
