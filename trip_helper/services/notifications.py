"""
Notifications sent to the room a command was issued in.
"""

import logging

from telegram import KeyboardButton, ReplyKeyboardMarkup

from trip_helper.models import DispatchContext

logger = logging.getLogger(__name__)

SHARE_LOCATION_BUTTON = "📍 Share my location"


async def notify_message(context: DispatchContext, message: str) -> bool:
    """
    Send a plain-text notification to the invoking room.

    Args:
        context: Dispatch context of the current invocation
        message: Text to send

    Returns:
        True if message sent successfully, False otherwise
    """
    logger.debug(f"Notifying user {context.sender.id} in room {context.room.id}")
    return await context.send_message_func(
        context.bot_token,
        context.room.id,
        message,
        message_thread_id=context.thread_id,
        parse_mode=None,
    )


async def send_get_location_message(context: DispatchContext, prompt_text: str) -> bool:
    """
    Ask the user to share their location.

    In private chats the prompt comes with a one-time keyboard whose only
    button sends the device location back to the bot. Telegram rejects
    location-request buttons in groups, so there the prompt is plain text and
    the location is shared through the attachment menu.

    Args:
        context: Dispatch context of the current invocation
        prompt_text: Text shown to the user

    Returns:
        True if message sent successfully, False otherwise
    """
    keyboard = None
    if context.room.is_private:
        keyboard = ReplyKeyboardMarkup(
            [[KeyboardButton(SHARE_LOCATION_BUTTON, request_location=True)]],
            one_time_keyboard=True,
            resize_keyboard=True,
        )
    return await context.send_message_func(
        context.bot_token,
        context.room.id,
        prompt_text,
        reply_markup=keyboard,
        message_thread_id=context.thread_id,
        parse_mode=None,
    )
