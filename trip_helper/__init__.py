"""
Trip Helper Telegram bot.

Lets users create and manage trip channels through `/trip` subcommands.
"""
