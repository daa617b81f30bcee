import logging
from typing import Any, Dict, List, Optional

from psycopg2 import IntegrityError
from psycopg2.extras import Json

from trip_helper.models import AssociationRecord, Room, slugify
from .connection import get_cursor

logger = logging.getLogger(__name__)


def read_by_association(record: AssociationRecord) -> List[Dict[str, Any]]:
    """
    Read the data stored under an association.

    Args:
        record: Association key to look up

    Returns:
        List with the stored data dict, or an empty list if nothing is stored
    """
    with get_cursor() as (_, cursor):
        logger.debug(f"Reading association {record}")
        cursor.execute(
            "SELECT data FROM associations WHERE model = %s AND association_id = %s",
            (record.model.value, record.id),
        )
        rows = cursor.fetchall()

    return [row[0] for row in rows if row and row[0] is not None]


def write_by_association(record: AssociationRecord, data: Dict[str, Any]) -> None:
    """
    Store data under an association, replacing whatever was there.

    Args:
        record: Association key to write
        data: JSON-serializable data
    """
    with get_cursor() as (_, cursor):
        logger.debug(f"Writing association {record}")
        cursor.execute(
            "INSERT INTO associations (model, association_id, data) VALUES (%s, %s, %s) "
            "ON CONFLICT (model, association_id) DO UPDATE SET data = EXCLUDED.data",
            (record.model.value, record.id, Json(data)),
        )


def get_room_by_name(name: str) -> Optional[Room]:
    """
    Look up a registered trip room by its exact name.

    Args:
        name: Full room name, e.g. "askTrip-paris"

    Returns:
        Room if registered, None otherwise
    """
    with get_cursor() as (_, cursor):
        cursor.execute("SELECT id, name FROM trip_rooms WHERE name = %s", (name,))
        row = cursor.fetchone()

    if row:
        return Room(id=int(row[0]), name=row[1], slugified_name=slugify(row[1]))
    return None


def create_room(name: str, creator_id: int, origin_room_id: int) -> bool:
    """
    Register a new trip room.

    Args:
        name: Full room name
        creator_id: Telegram ID of the user creating the room
        origin_room_id: Chat the room was requested from

    Returns:
        True if the room was registered, False if the name is taken or error occurs
    """
    try:
        with get_cursor() as (conn, cursor):
            try:
                cursor.execute(
                    "INSERT INTO trip_rooms (name, creator_id, origin_room_id) VALUES (%s, %s, %s)",
                    (name, creator_id, origin_room_id),
                )
                logger.info(f"Registered trip room {name} for user {creator_id}")
                return True
            except IntegrityError:
                conn.rollback()
                logger.info(f"Trip room {name} is already registered")
                return False
    except Exception:
        logger.exception(f"Error registering trip room {name}")
        return False
