"""
Services layer.

This module contains the outward-facing services used by the bot:
- Telegram client for sending messages
- Notifications sent on behalf of the bot
- Trip advisor using OpenAI
"""

from trip_helper.services.telegram_client import send_message
from trip_helper.services.notifications import notify_message, send_get_location_message
from trip_helper.services.trip_advisor import TripAdvisor

__all__ = [
    "send_message",
    "notify_message",
    "send_get_location_message",
    "TripAdvisor",
]
