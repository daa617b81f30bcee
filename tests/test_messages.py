"""User-facing texts that must stay stable."""

from trip_helper.bot import messages


def test_room_exists_message():
    assert messages.get_room_exists_message("paris") == (
        "Trip channel with name 'paris' already exists. Enjoy app's features there!🚀"
    )


def test_create_success_message():
    assert messages.get_create_success_message("tokyo") == (
        "Your Trip channel tokyo created successfully!, Enjoy your trip! 🚀"
    )


def test_create_failure_message():
    assert messages.get_create_failure_message("tokyo") == (
        "Failed to create Trip channel tokyo. Please try again with a different name."
    )


def test_create_usage_message():
    assert messages.get_create_usage_message() == (
        "Please provide a name for the trip channel. Usage: `/trip create <channel-name>`"
    )


def test_location_known_message():
    assert messages.get_location_known_message("Paris") == (
        "Your current location is set to Paris. Want to change your location? \n"
        " We will use your device **IP address** to get your location"
    )


def test_location_unknown_message():
    assert messages.get_location_unknown_message() == (
        "Share your Location with us, We will use your device **IP address** to get your location"
    )


def test_invalid_subcommand_message():
    assert messages.get_invalid_subcommand_message("foo") == (
        '**Invalid subcommand**: "foo". Type `/trip help` for a list of available commands.'
    )


def test_info_message_escapes_html():
    text = messages.get_info_message("48.8566, 2.3522", "Go to <the> Louvre & eat")
    assert "&lt;the&gt;" in text
    assert "&amp;" in text
