"""
Message templates for bot responses.

This module contains all message templates used by the bot commands.
"""

from html import escape


def get_help_message() -> str:
    """Get help message for /trip help command."""
    return (
        "📚 <b>Available Commands:</b>\n\n"
        "/trip help - Show this list\n"
        "/trip create &lt;channel-name&gt; - Create a trip channel\n"
        "/trip location - Share or change your location\n"
        "/trip info - Get a briefing about your current location\n"
        "/trip reminder - Remind me about my trip channel\n"
        "/trip start - Show the welcome message"
    )


def get_welcome_message() -> str:
    """Get welcome message for /trip start command."""
    return (
        "👋 <b>Welcome to Trip Helper!</b>\n\n"
        "Create a channel for your trip with /trip create &lt;channel-name&gt; "
        "and share your location with /trip location to get tips about where you are.\n\n"
        "Use /trip help to see all available commands."
    )


def get_room_exists_message(name: str) -> str:
    """Get message when a trip channel with that name already exists."""
    return f"Trip channel with name '{name}' already exists. Enjoy app's features there!🚀"


def get_create_success_message(name: str) -> str:
    """Get message for a successfully created trip channel."""
    return f"Your Trip channel {name} created successfully!, Enjoy your trip! 🚀"


def get_create_failure_message(name: str) -> str:
    """Get message when a trip channel could not be created."""
    return f"Failed to create Trip channel {name}. Please try again with a different name."


def get_create_usage_message() -> str:
    """Get message when create is missing the channel name."""
    return "Please provide a name for the trip channel. Usage: `/trip create <channel-name>`"


def get_location_known_message(location: str) -> str:
    """Get location prompt when a location is already set."""
    return (
        f"Your current location is set to {location}. Want to change your location? \n"
        " We will use your device **IP address** to get your location"
    )


def get_location_unknown_message() -> str:
    """Get location prompt when no location is set."""
    return "Share your Location with us, We will use your device **IP address** to get your location"


def get_location_saved_message(location: str) -> str:
    """Get confirmation after a location was shared."""
    return f"📍 Location saved: {location}. Use /trip info to learn about the area."


def get_invalid_subcommand_message(command: str) -> str:
    """Get message for an unrecognized subcommand."""
    return f'**Invalid subcommand**: "{command}". Type `/trip help` for a list of available commands.'


def get_info_no_location_message() -> str:
    """Get message when info is requested before sharing a location."""
    return (
        "📭 <b>No location set</b>\n\n"
        "Share your location with /trip location first, then ask again."
    )


def get_info_error_message() -> str:
    """Get error message for info command."""
    return "❌ Could not get information about your location. Please try again later."


def get_info_message(location: str, briefing: str) -> str:
    """Get trip briefing message for info command."""
    return f"🧭 <b>About {escape(location)}</b>\n\n{escape(briefing)}"


def get_reminder_message(room_name: str) -> str:
    """Get reminder about the user's trip channel."""
    return (
        f"⏰ <b>Reminder</b>\n\n"
        f"Your trip channel <b>{room_name}</b> is waiting for you. "
        "Share your location there with /trip location to get tips."
    )


def get_no_reminder_message() -> str:
    """Get message when the user has no trip channel to be reminded about."""
    return (
        "ℹ️ You have no trip channel yet.\n\n"
        "Create one with /trip create &lt;channel-name&gt;."
    )


def get_error_message() -> str:
    """Get generic error message."""
    return "❌ Error processing command. Please try again."
