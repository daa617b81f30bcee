from unittest.mock import AsyncMock

import pytest

from trip_helper.models import DispatchContext, Room, User

BOT_TOKEN = "123:test-token"
ROOM_ID = -1001427988146
SENDER_ID = 87575599


@pytest.fixture
def room():
    return Room(
        id=ROOM_ID,
        name="Summer in Paris",
        slugified_name="summer-in-paris",
        type="supergroup",
    )


@pytest.fixture
def private_room():
    return Room(id=SENDER_ID, name="traveller", slugified_name="traveller", type="private")


@pytest.fixture
def sender():
    return User(id=SENDER_ID, username="traveller", first_name="Ann")


@pytest.fixture
def send_message_func():
    return AsyncMock(return_value=True)


@pytest.fixture
def make_context(room, sender, send_message_func):
    def _make(*params, thread_id=None, room=room):
        return DispatchContext(
            params=list(params),
            sender=sender,
            room=room,
            bot_token=BOT_TOKEN,
            send_message_func=send_message_func,
            trigger_id="788190251",
            thread_id=thread_id,
        )

    return _make

