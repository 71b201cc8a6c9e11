"""Conversation state as immutable snapshots.

Every UI action goes through a transition function that returns a new
ChatState. Rendering reads the snapshot; nothing mutates it in place.
"""

from docchat.state.conversation import (
    NO_CONTEXT,
    ChatState,
    ConversationBusyError,
    add_context,
    clear_messages,
    finish_send,
    select_context,
    selected_context,
    start_send,
)

__all__ = [
    "NO_CONTEXT",
    "ChatState",
    "ConversationBusyError",
    "add_context",
    "clear_messages",
    "finish_send",
    "select_context",
    "selected_context",
    "start_send",
]
