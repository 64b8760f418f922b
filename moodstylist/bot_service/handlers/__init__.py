"""Register message and command handlers."""

from __future__ import annotations

from aiogram import Router

from moodstylist.bot_service.context import BotContext

from . import reset, selection, start


def setup_handlers(router: Router, context: BotContext) -> None:
    """Attach all handler groups to the provided router."""

    start.setup(router, context)
    reset.setup(router, context)
    selection.setup(router, context)
