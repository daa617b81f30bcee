"""
Application settings and configuration.

This module defines the configuration class for managing environment variables.
"""

import os


class Config:
    """Configuration class for managing environment variables."""

    TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")
    TRIP_COMMAND: str = os.getenv("TRIP_COMMAND", "trip")
    TRIP_ROOM_PREFIX: str = os.getenv("TRIP_ROOM_PREFIX", "askTrip-")

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration.

        Checks that all required environment variables are set.

        Returns:
            True if validation succeeds

        Raises:
            ValueError: If any required environment variables are missing
        """
        required = ["TELEGRAM_BOT_TOKEN", "OPENAI_API_KEY"]
        missing = [var for var in required if not getattr(cls, var)]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")
        return True
