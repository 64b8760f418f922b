"""Custom aiogram filters used by the bot."""

from __future__ import annotations

from typing import Any

from aiogram.filters import BaseFilter
from aiogram.types import Message

from moodstylist.bot_service.context import BotContext
from moodstylist.wizard.state_machine import WizardStep


class StepFilter(BaseFilter):
    """Matches messages when the chat's wizard is at the expected step."""

    def __init__(self, context: BotContext, expected: WizardStep) -> None:
        self._context = context
        self._expected = expected

    async def __call__(self, message: Message) -> bool | dict[str, Any]:
        wizard = self._context.wizards.get(message.bot, message.chat.id)
        if wizard.step is self._expected:
            return {"wizard": wizard}
        return False
