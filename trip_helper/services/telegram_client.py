"""
Telegram bot client service.

This module provides functionality for sending messages via Telegram bot API.
"""

import logging
from typing import Any, Optional

from telegram import Bot
from telegram.error import TelegramError

logger = logging.getLogger(__name__)


async def send_message(
    bot_token: str,
    chat_id: int,
    message: str,
    reply_markup: Optional[Any] = None,
    message_thread_id: Optional[int] = None,
    parse_mode: Optional[str] = "HTML",
) -> bool:
    """
    Send a message to a chat via Telegram bot.

    Args:
        bot_token: Telegram bot token
        chat_id: Telegram chat ID to send message to
        message: Message text to send
        reply_markup: Optional keyboard to attach
        message_thread_id: Forum topic to post in, if any
        parse_mode: Telegram parse mode, None for plain text

    Returns:
        True if message sent successfully, False otherwise
    """
    try:
        bot = Bot(token=bot_token)

        await bot.send_message(
            chat_id=chat_id,
            text=message,
            parse_mode=parse_mode,
            reply_markup=reply_markup,
            message_thread_id=message_thread_id,
        )

        logger.info(f"Successfully sent message to chat {chat_id}")
        return True

    except TelegramError as e:
        logger.error(f"Telegram error sending message to chat {chat_id}: {e}")
        return False
    except Exception as e:
        logger.error(f"Error sending message to chat {chat_id}: {e}")
        return False
