"""
Command parsing utilities.

This module handles parsing of Telegram bot commands from message text.
"""

from typing import Optional, List, Tuple


def parse_command(message_text: str) -> Tuple[Optional[str], List[str]]:
    """
    Parse command from message text.

    Args:
        message_text: Message text from Telegram

    Returns:
        Tuple of (command, args) or (None, []) if not a command

    Examples:
        >>> parse_command("/trip create Paris")
        ('trip', ['create', 'Paris'])
        >>> parse_command("/trip@TripHelperBot help")
        ('trip', ['help'])
        >>> parse_command("hello")
        (None, [])
    """
    if not message_text or not message_text.startswith("/"):
        return None, []

    # Split command and arguments
    parts = message_text.split()
    command = parts[0][1:].split("@", 1)[0].lower()  # Remove '/' and bot mention
    if not command:
        return None, []
    args = parts[1:]

    return command, args
