"""Tests for the database layer with a mocked psycopg2 cursor."""

from contextlib import contextmanager
from unittest.mock import MagicMock, patch

import pytest
from psycopg2 import IntegrityError

from trip_helper.database import location, repository, room_interaction, room_name
from trip_helper.models import AssociationModel, AssociationRecord, Room, User


@pytest.fixture
def cursor():
    """Patch get_cursor in repository and yield the fake (conn, cursor)."""
    conn = MagicMock()
    cur = MagicMock()

    @contextmanager
    def fake_get_cursor():
        yield conn, cur

    with patch.object(repository, "get_cursor", fake_get_cursor):
        cur.conn = conn
        yield cur


# --- association store ---


def test_read_by_association_returns_data(cursor):
    cursor.fetchall.return_value = [({"userLocation": "Paris"},)]
    record = AssociationRecord(AssociationModel.ROOM, "1/paris")

    assert repository.read_by_association(record) == [{"userLocation": "Paris"}]
    sql, params = cursor.execute.call_args.args
    assert "FROM associations" in sql
    assert params == ("room", "1/paris")


def test_read_by_association_empty(cursor):
    cursor.fetchall.return_value = []

    assert repository.read_by_association(AssociationRecord(AssociationModel.USER, "x")) == []


def test_write_by_association_upserts_json(cursor):
    repository.write_by_association(AssociationRecord(AssociationModel.USER, "5#RoomId"), {"roomId": 3})

    sql, params = cursor.execute.call_args.args
    assert "ON CONFLICT" in sql
    assert params[:2] == ("user", "5#RoomId")
    assert params[2].adapted == {"roomId": 3}


def test_read_errors_propagate():
    @contextmanager
    def failing():
        raise RuntimeError("db down")
        yield

    with patch.object(repository, "get_cursor", failing):
        with pytest.raises(RuntimeError):
            repository.read_by_association(AssociationRecord(AssociationModel.ROOM, "x"))


# --- trip room registry ---


def test_get_room_by_name_found(cursor):
    cursor.fetchone.return_value = (12, "askTrip-paris")

    room = repository.get_room_by_name("askTrip-paris")

    assert room == Room(id=12, name="askTrip-paris", slugified_name="asktrip-paris")
    assert cursor.execute.call_args.args[1] == ("askTrip-paris",)


def test_get_room_by_name_missing(cursor):
    cursor.fetchone.return_value = None

    assert repository.get_room_by_name("askTrip-nowhere") is None


def test_create_room(cursor):
    assert repository.create_room("askTrip-tokyo", 5, -100) is True
    assert cursor.execute.call_args.args[1] == ("askTrip-tokyo", 5, -100)


def test_create_room_taken(cursor):
    cursor.execute.side_effect = IntegrityError("duplicate key")

    assert repository.create_room("askTrip-tokyo", 5, -100) is False
    cursor.conn.rollback.assert_called_once()


# --- storages built on the association store ---


def test_store_interaction_room_id():
    with patch.object(room_interaction, "write_by_association") as write:
        assert room_interaction.RoomInteractionStorage(5).store_interaction_room_id(-100) is True

    write.assert_called_once_with(
        AssociationRecord(AssociationModel.USER, "5#RoomId"), {"roomId": -100}
    )


def test_store_interaction_room_id_swallows_failure():
    with patch.object(room_interaction, "write_by_association", side_effect=RuntimeError("db down")):
        assert room_interaction.RoomInteractionStorage(5).store_interaction_room_id(-100) is False


def test_store_room_name():
    room = Room(id=-100, name="Trip", slugified_name="trip")
    with patch.object(room_name, "write_by_association") as write:
        assert room_name.store_room_name(room, User(id=5), "Tokyo") is True

    write.assert_called_once_with(
        AssociationRecord(AssociationModel.USER, "5#RoomName"),
        {"roomName": "tokyo", "requestedIn": -100},
    )


@pytest.mark.parametrize("name", ["", "two words", "x" * 65, "pa/ris"])
def test_store_room_name_rejects_invalid(name):
    room = Room(id=-100, name="Trip", slugified_name="trip")
    with patch.object(room_name, "write_by_association") as write:
        assert room_name.store_room_name(room, User(id=5), name) is False

    write.assert_not_called()


def test_store_room_name_store_failure():
    room = Room(id=-100, name="Trip", slugified_name="trip")
    with patch.object(room_name, "write_by_association", side_effect=RuntimeError("db down")):
        assert room_name.store_room_name(room, User(id=5), "tokyo") is False


def test_get_room_name():
    with patch.object(room_name, "read_by_association", return_value=[{"roomName": "tokyo"}]):
        assert room_name.get_room_name(User(id=5)) == "tokyo"
    with patch.object(room_name, "read_by_association", return_value=[]):
        assert room_name.get_room_name(User(id=5)) is None


def test_get_user_location_key():
    room = Room(id=-100, name="Summer in Paris", slugified_name="summer-in-paris")
    with patch.object(location, "read_by_association", return_value=[{"userLocation": "Paris"}]) as read:
        assert location.get_user_location(room) == "Paris"

    read.assert_called_once_with(AssociationRecord(AssociationModel.ROOM, "-100/summer-in-paris"))


@pytest.mark.parametrize("records", [[], [{}], [{"userLocation": ""}]])
def test_get_user_location_absent(records):
    room = Room(id=-100, name="Trip", slugified_name="trip")
    with patch.object(location, "read_by_association", return_value=records):
        assert location.get_user_location(room) is None


def test_store_user_location():
    room = Room(id=-100, name="Trip", slugified_name="trip")
    with patch.object(location, "write_by_association") as write:
        location.store_user_location(room, "48.8566, 2.3522")

    write.assert_called_once_with(
        AssociationRecord(AssociationModel.ROOM, "-100/trip"), {"userLocation": "48.8566, 2.3522"}
    )
