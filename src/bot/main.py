"""Bot process entrypoint."""

from __future__ import annotations

import asyncio
import logging

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties

from src.app import create_app
from src.bot.router import router
from src.config.logging import configure_logging
from src.config.settings import load_settings

logger = logging.getLogger(__name__)


async def main() -> None:
    """Run the Telegram bot polling loop."""

    settings = load_settings()
    configure_logging()

    bot = Bot(token=settings.telegram_bot_token, default=DefaultBotProperties(parse_mode=None))
    app = create_app(settings, send=bot.send_message)
    await app.pool.open(wait=True)

    dp = Dispatcher()
    dp.include_router(router)

    try:
        logger.info("starting polling default_language=%s", settings.default_language)
        await dp.start_polling(bot, app=app)
    finally:
        logger.info("shutting down sessions=%d", len(app.sessions))
        await app.pool.close()
        await bot.session.close()


if __name__ == "__main__":
    asyncio.run(main())
