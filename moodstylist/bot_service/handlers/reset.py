"""Handler that starts a new selection cycle."""

from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command
from aiogram.types import Message

from moodstylist.bot_service.context import BotContext
from moodstylist.bot_service.keyboards import MOOD_KEYBOARD


def setup(router: Router, context: BotContext) -> None:
    """Register /reset handler."""

    @router.message(Command("reset"))
    async def handle_reset(message: Message) -> None:
        context.wizards.get(message.bot, message.chat.id).reset()
        await message.answer("Let's start over. Choose your mood.", reply_markup=MOOD_KEYBOARD)
