"""
Bot command handling module.

This module contains all Telegram bot command processing logic including:
- Command parsing
- Message templates
- Command handler
- Command resolution and dispatch
- Update routing
"""

from trip_helper.bot.parser import parse_command
from trip_helper.bot.resolver import CommandResolver, TripCommand
from trip_helper.bot.router import process_update

__all__ = ["parse_command", "CommandResolver", "TripCommand", "process_update"]
