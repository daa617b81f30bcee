"""
Per-invocation dispatch context.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, List, Optional

from trip_helper.models.chat import Room, User


@dataclass
class DispatchContext:
    """
    Everything one command invocation needs.

    A context is created by the router for a single invocation and handed to
    the resolver and the command handler; it is never shared or persisted.

    Attributes:
        params: Invocation tokens, token 0 is the subcommand
        sender: User who issued the command
        room: Chat the command was issued in
        bot_token: Telegram bot token
        send_message_func: Coroutine function (bot_token, chat_id, message, **kwargs)
        trigger_id: Telegram update id that triggered the invocation
        thread_id: Forum topic the command was issued in, if any
    """
    params: List[str]
    sender: User
    room: Room
    bot_token: str
    send_message_func: Callable[..., Awaitable[bool]]
    trigger_id: Optional[str] = None
    thread_id: Optional[int] = None
