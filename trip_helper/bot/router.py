"""
Update routing logic.

This module routes incoming Telegram updates: shared locations are stored,
`/trip` commands are handed to the command resolver.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from trip_helper.bot import messages
from trip_helper.bot.parser import parse_command
from trip_helper.bot.resolver import CommandResolver
from trip_helper.config import config
from trip_helper.database.location import store_user_location
from trip_helper.models import DispatchContext, Room, User

logger = logging.getLogger(__name__)

# Top-level commands that are shorthands for a /trip subcommand
SHORTHAND_COMMANDS = ("start", "help")


def _format_location(location: Dict[str, Any]) -> str:
    return f"{location['latitude']:.4f}, {location['longitude']:.4f}"


def _command_tokens(command: str, args: List[str]) -> List[str]:
    """
    Map a parsed command to resolver tokens.

    The resolver needs at least one token, so a bare `/trip` becomes help.
    """
    if command == config.TRIP_COMMAND.lower():
        return args or ["help"]
    if command in SHORTHAND_COMMANDS:
        return [command]
    return [command, *args]


async def process_location(
    room: Room,
    location: Dict[str, Any],
    send_message_func: Callable[..., Awaitable[bool]],
    bot_token: str,
) -> bool:
    """
    Store a location shared by the user and confirm it.

    Args:
        room: Chat the location was shared in
        location: Telegram location object
        send_message_func: Function to send messages
        bot_token: Telegram bot token

    Returns:
        True if location stored and confirmed, False otherwise
    """
    location_text = _format_location(location)
    try:
        store_user_location(room, location_text)
    except Exception as e:
        logger.error(f"Error storing location for room {room.id}: {e}")
        return await send_message_func(bot_token, room.id, messages.get_error_message())
    return await send_message_func(
        bot_token, room.id, messages.get_location_saved_message(location_text)
    )


async def process_update(
    update: Dict[str, Any],
    send_message_func: Callable[..., Awaitable[bool]],
    bot_token: str,
) -> bool:
    """
    Process a Telegram update and route it to the appropriate handler.

    Args:
        update: Telegram update object
        send_message_func: Function to send messages (bot_token, chat_id, message, **kwargs)
        bot_token: Telegram bot token

    Returns:
        True if update processed successfully, False otherwise
    """
    message: Optional[Dict[str, Any]] = update.get("message")
    if not message or "chat" not in message or "from" not in message:
        logger.info("Update carries no user message, ignoring")
        return True

    room = Room.from_telegram(message["chat"])
    sender = User.from_telegram(message["from"])

    if "location" in message:
        return await process_location(room, message["location"], send_message_func, bot_token)

    command, args = parse_command(message.get("text", ""))
    if not command:
        # Not a command, ignore non-command messages
        logger.info(f"Received non-command message from chat_id {room.id}, ignoring")
        return True

    context = DispatchContext(
        params=_command_tokens(command, args),
        sender=sender,
        room=room,
        bot_token=bot_token,
        send_message_func=send_message_func,
        trigger_id=str(update["update_id"]) if "update_id" in update else None,
        thread_id=message.get("message_thread_id"),
    )

    try:
        await CommandResolver(context).resolve_command()
        return True
    except Exception as e:
        logger.error(f"Error processing command {context.params[0]}: {e}")
        await send_message_func(bot_token, room.id, messages.get_error_message())
        return False
