"""
Tracks which room each user last issued a command in.
"""

import logging

from trip_helper.models import AssociationModel, AssociationRecord
from .repository import write_by_association

logger = logging.getLogger(__name__)


class RoomInteractionStorage:
    """Last-interaction room per user, stored in the association store."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        self.association = AssociationRecord(
            AssociationModel.USER, f"{user_id}#RoomId"
        )

    def store_interaction_room_id(self, room_id: int) -> bool:
        """
        Record room_id as the user's last-interaction room.

        Best effort: failures are logged and never raised.

        Returns:
            True if the record was written, False otherwise
        """
        try:
            write_by_association(self.association, {"roomId": room_id})
            logger.debug(f"Stored interaction room {room_id} for user {self.user_id}")
            return True
        except Exception:
            logger.exception(f"Error storing interaction room for user {self.user_id}")
            return False
