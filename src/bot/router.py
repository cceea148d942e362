"""Bot router composition."""

from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command, CommandStart

from src.bot.handlers import (
    handle_clear,
    handle_list,
    handle_message,
    handle_start,
    handle_suggest,
)

router = Router(name="root")
router.message.register(handle_start, CommandStart())
router.message.register(handle_list, Command("list"))
router.message.register(handle_clear, Command("clear"))
router.message.register(handle_suggest, Command("suggest"))
router.message.register(handle_message, F.text | F.caption)
