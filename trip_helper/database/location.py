"""
Per-room user location storage.
"""

import logging
from typing import Optional

from trip_helper.models import AssociationModel, AssociationRecord, Room
from .repository import read_by_association, write_by_association

logger = logging.getLogger(__name__)


def _location_association(room: Room) -> AssociationRecord:
    return AssociationRecord(
        AssociationModel.ROOM, f"{room.id}/{room.slugified_name}"
    )


def get_user_location(room: Room) -> Optional[str]:
    """
    Get the location shared in a room.

    Returns:
        Location string, or None if no location has been shared
    """
    records = read_by_association(_location_association(room))
    if not records:
        return None
    return records[0].get("userLocation") or None


def store_user_location(room: Room, location: str) -> None:
    """Store the location shared in a room."""
    write_by_association(_location_association(room), {"userLocation": location})
    logger.info(f"Stored location for room {room.id}")
