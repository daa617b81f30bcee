"""
Storage for the trip channel name a user asked for.
"""

import logging
import re
from typing import Optional

from trip_helper.models import AssociationModel, AssociationRecord, Room, User
from .repository import read_by_association, write_by_association

logger = logging.getLogger(__name__)

_VALID_ROOM_NAME = re.compile(r"^[a-z0-9_-]{1,64}$")


def _room_name_association(user_id: int) -> AssociationRecord:
    return AssociationRecord(AssociationModel.USER, f"{user_id}#RoomName")


def store_room_name(room: Room, sender: User, name: str) -> bool:
    """
    Record the trip channel name the sender asked for.

    Args:
        room: Chat the request was made in
        sender: User making the request
        name: Requested channel name, without the trip prefix

    Returns:
        True if the name was stored, False if it is invalid or error occurs
    """
    normalized = name.strip().lower()
    if not _VALID_ROOM_NAME.match(normalized):
        logger.info(f"Rejected trip channel name {name!r} from user {sender.id}")
        return False

    try:
        write_by_association(
            _room_name_association(sender.id),
            {"roomName": normalized, "requestedIn": room.id},
        )
        logger.info(f"Stored trip channel name {normalized} for user {sender.id}")
        return True
    except Exception:
        logger.exception(f"Error storing trip channel name for user {sender.id}")
        return False


def get_room_name(sender: User) -> Optional[str]:
    """Get the trip channel name the sender last asked for, or None."""
    records = read_by_association(_room_name_association(sender.id))
    if not records:
        return None
    return records[0].get("roomName")
