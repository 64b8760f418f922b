"""Shared dependencies passed into handler setup functions."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field

from aiogram import Bot

from moodstylist.wizard.state_machine import OutfitSource, SelectionWizard


class ChatNotifier:
    """Sends wizard notifications to a Telegram chat."""

    def __init__(self, bot: Bot, chat_id: int) -> None:
        self._bot = bot
        self._chat_id = chat_id

    async def success(self, text: str) -> None:
        await self._bot.send_message(self._chat_id, f"✨ {text}")

    async def error(self, text: str) -> None:
        await self._bot.send_message(self._chat_id, f"⚠️ {text}")


@dataclass(slots=True)
class WizardRegistry:
    """Keeps in-memory wizards for the most recently active chats.

    Beyond ``max_chats`` the least recently used wizard is dropped and that
    chat starts again from the mood step.
    """

    source: OutfitSource
    transition_delay: float = 0.3
    max_chats: int = 1000
    _wizards: OrderedDict[int, SelectionWizard] = field(default_factory=OrderedDict, init=False)

    def __len__(self) -> int:
        return len(self._wizards)

    def get(self, bot: Bot, chat_id: int) -> SelectionWizard:
        """Return the chat's wizard, creating it on first use."""

        wizard = self._wizards.get(chat_id)
        if wizard is not None:
            self._wizards.move_to_end(chat_id)
            return wizard

        wizard = SelectionWizard(
            self.source,
            ChatNotifier(bot, chat_id),
            transition_delay=self.transition_delay,
        )
        self._wizards[chat_id] = wizard
        while len(self._wizards) > self.max_chats:
            self._wizards.popitem(last=False)
        return wizard


@dataclass(slots=True)
class BotContext:
    """Container for objects shared across handlers."""

    wizards: WizardRegistry
