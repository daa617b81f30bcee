"""
Bot command handler.

This module contains the business actions reachable from `/trip` subcommands.
Each action sends its own messages.
"""

import logging

from trip_helper.bot import messages
from trip_helper.config import config
from trip_helper.database.location import get_user_location
from trip_helper.database.repository import create_room
from trip_helper.database.room_name import get_room_name
from trip_helper.models import DispatchContext
from trip_helper.services.trip_advisor import TripAdvisor

logger = logging.getLogger(__name__)


class CommandHandler:
    """Actions for the recognized `/trip` subcommands."""

    def __init__(self, context: DispatchContext):
        self.context = context
        self.sender = context.sender
        self.room = context.room

    async def _send(self, message: str) -> bool:
        return await self.context.send_message_func(
            self.context.bot_token,
            self.room.id,
            message,
            message_thread_id=self.context.thread_id,
        )

    async def help(self) -> None:
        """Send the list of available subcommands."""
        await self._send(messages.get_help_message())

    async def create(self, name: str) -> None:
        """
        Register the trip room for a name that passed reservation.

        Args:
            name: Channel name without the trip prefix
        """
        room_name = f"{config.TRIP_ROOM_PREFIX}{name}"
        if create_room(room_name, self.sender.id, self.room.id):
            logger.info(f"User {self.sender.display_name} created trip room {room_name}")
        else:
            logger.warning(f"Trip room {room_name} was not registered for user {self.sender.id}")

    async def info(self) -> None:
        """Send a travel briefing about the room's location."""
        location = get_user_location(self.room)
        if not location:
            await self._send(messages.get_info_no_location_message())
            return

        briefing = await TripAdvisor().describe_location(location)
        if briefing:
            await self._send(messages.get_info_message(location, briefing))
        else:
            await self._send(messages.get_info_error_message())

    async def reminder(self) -> None:
        """Remind the sender about the trip channel they asked for."""
        room_name = get_room_name(self.sender)
        if room_name:
            await self._send(messages.get_reminder_message(f"{config.TRIP_ROOM_PREFIX}{room_name}"))
        else:
            await self._send(messages.get_no_reminder_message())

    async def get_default_notification(self) -> None:
        """Send the welcome notification."""
        await self._send(messages.get_welcome_message())
