"""Entrypoint for the Telegram front end of the selection wizard."""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress

from aiogram import Bot, Dispatcher, Router
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from moodstylist.bot_service.context import BotContext, WizardRegistry
from moodstylist.bot_service.handlers import setup_handlers
from moodstylist.config.settings import get_settings
from moodstylist.monitoring.logging import configure_logging
from moodstylist.wizard.client import StylistAPIClient

logger = logging.getLogger(__name__)


async def main() -> None:
    """Initialise dependencies and start polling Telegram."""

    configure_logging()

    settings = get_settings()
    if not settings.telegram_bot_token:
        raise RuntimeError("TELEGRAM_BOT_TOKEN is not configured.")

    client = StylistAPIClient(settings.stylist_api_url)
    registry = WizardRegistry(client, transition_delay=settings.wizard_transition_delay)

    bot = Bot(
        token=settings.telegram_bot_token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )
    dispatcher = Dispatcher()
    router = Router()
    setup_handlers(router, BotContext(wizards=registry))
    dispatcher.include_router(router)

    try:
        logger.info("Starting stylist bot polling against %s", settings.stylist_api_url)
        await dispatcher.start_polling(bot)
    finally:
        with suppress(Exception):
            await bot.session.close()
        with suppress(Exception):
            await client.close()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
