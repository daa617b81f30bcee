"""
Command resolution and dispatch.

This module turns one `/trip` invocation into the matching handler call or
notification.
"""

import logging
from enum import Enum
from typing import Awaitable, Callable, Dict, Optional

from trip_helper.bot import messages
from trip_helper.bot.handler import CommandHandler
from trip_helper.config import config
from trip_helper.database.location import get_user_location
from trip_helper.database.repository import get_room_by_name
from trip_helper.database.room_interaction import RoomInteractionStorage
from trip_helper.database.room_name import store_room_name
from trip_helper.models import DispatchContext
from trip_helper.services.notifications import notify_message, send_get_location_message

logger = logging.getLogger(__name__)


class TripCommand(str, Enum):
    """Subcommands understood by `/trip`."""
    HELP = "help"
    CREATE = "create"
    REMINDER = "reminder"
    LOCATION = "location"
    INFO = "info"
    START = "start"


class CommandResolver:
    """
    Resolves a single invocation bound to a dispatch context.

    Args:
        context: Dispatch context of the invocation; context.params must hold
            at least one token
    """

    def __init__(self, context: DispatchContext):
        self.context = context
        self.params = context.params
        self.sender = context.sender
        self.room = context.room

    async def resolve_command(self) -> None:
        """
        Record the interaction, then dispatch on the subcommand.

        Store read failures propagate to the caller.
        """
        RoomInteractionStorage(self.sender.id).store_interaction_room_id(self.room.id)

        handler = CommandHandler(self.context)
        command = self.params[0].lower()
        sub_command = self.params[1].lower() if len(self.params) > 1 else None

        location_value = get_user_location(self.room)

        routes: Dict[TripCommand, Callable[[], Awaitable[None]]] = {
            TripCommand.HELP: handler.help,
            TripCommand.CREATE: lambda: self._create(handler, sub_command),
            TripCommand.REMINDER: handler.reminder,
            TripCommand.LOCATION: lambda: self._location(location_value),
            TripCommand.INFO: handler.info,
            TripCommand.START: handler.get_default_notification,
        }

        try:
            trip_command = TripCommand(command)
        except ValueError:
            logger.info(f"Invalid subcommand {command!r} from user {self.sender.id}")
            await notify_message(self.context, messages.get_invalid_subcommand_message(command))
            return

        logger.info(f"Resolving {trip_command.value} for user {self.sender.id} in room {self.room.id}")
        await routes[trip_command]()

    async def _create(self, handler: CommandHandler, name: Optional[str]) -> None:
        if name is None:
            await notify_message(self.context, messages.get_create_usage_message())
            return

        # Check and reservation are not atomic; concurrent creates may both pass.
        if get_room_by_name(f"{config.TRIP_ROOM_PREFIX}{name}") is not None:
            await notify_message(self.context, messages.get_room_exists_message(name))
            return

        if store_room_name(self.room, self.sender, name):
            await handler.create(name)
            await notify_message(self.context, messages.get_create_success_message(name))
        else:
            await notify_message(self.context, messages.get_create_failure_message(name))

    async def _location(self, location_value: Optional[str]) -> None:
        if location_value:
            prompt = messages.get_location_known_message(location_value)
        else:
            prompt = messages.get_location_unknown_message()
        await send_get_location_message(self.context, prompt)
