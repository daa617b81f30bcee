"""
Chat-related data models.

This module contains data models for Telegram users and chats (rooms).
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """
    Turn a display name into a URL-safe slug.

    Examples:
        >>> slugify("Summer in Paris!")
        'summer-in-paris'
    """
    return _SLUG_SEPARATORS.sub("-", name.lower()).strip("-")


@dataclass
class User:
    """Model for the user who issued a command."""
    id: int
    username: Optional[str] = None
    first_name: Optional[str] = None

    @classmethod
    def from_telegram(cls, data: Dict[str, Any]) -> "User":
        """Build a user from a Telegram `from` object."""
        return cls(
            id=data["id"],
            username=data.get("username"),
            first_name=data.get("first_name"),
        )

    @property
    def display_name(self) -> str:
        return self.username or self.first_name or str(self.id)


@dataclass
class Room:
    """Model for a chat the bot was invoked in."""
    id: int
    name: str
    slugified_name: str
    type: Optional[str] = None

    @classmethod
    def from_telegram(cls, data: Dict[str, Any]) -> "Room":
        """
        Build a room from a Telegram `chat` object.

        Group chats are named by their title; private chats have no title,
        so the username (or first name) stands in.

        Args:
            data: Telegram chat object

        Returns:
            Room instance
        """
        name = (
            data.get("title")
            or data.get("username")
            or data.get("first_name")
            or str(data["id"])
        )
        return cls(
            id=data["id"],
            name=name,
            slugified_name=slugify(name),
            type=data.get("type"),
        )

    @property
    def is_private(self) -> bool:
        return self.type == "private"
