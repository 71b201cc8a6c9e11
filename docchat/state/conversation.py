"""Transcript, contexts and selection for one chat page."""

import uuid

from pydantic import BaseModel, ConfigDict

from docchat.models.schemas import Context, Message, Role

NO_CONTEXT = "no-context"


class ConversationBusyError(Exception):
    """Raised when a message is sent while a reply is still pending."""

    pass


class ChatState(BaseModel):
    """Snapshot of a conversation.

    Attributes:
        messages: Transcript in insertion order. Append-only.
        contexts: Uploaded documents in insertion order.
        selected_context_id: Id of the grounding context, or NO_CONTEXT.
        busy: True while a reply is pending for this conversation.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...] = ()
    contexts: tuple[Context, ...] = ()
    selected_context_id: str = NO_CONTEXT
    busy: bool = False


def add_context(state: ChatState, name: str, content: str) -> tuple[ChatState, Context]:
    """Register an uploaded document.

    Returns:
        The new state and the created Context.
    """
    context = Context(id=uuid.uuid4().hex, name=name, content=content)
    return state.model_copy(update={"contexts": (*state.contexts, context)}), context


def _find_context(state: ChatState, context_id: str) -> Context | None:
    for context in state.contexts:
        if context.id == context_id:
            return context
    return None


def select_context(state: ChatState, context_id: str | None) -> ChatState:
    """Select a context by id. Unknown ids fall back to NO_CONTEXT."""
    if not context_id or _find_context(state, context_id) is None:
        context_id = NO_CONTEXT
    return state.model_copy(update={"selected_context_id": context_id})


def selected_context(state: ChatState) -> Context | None:
    """Resolve the selection, treating a stale id as no context."""
    if state.selected_context_id == NO_CONTEXT:
        return None
    return _find_context(state, state.selected_context_id)


def start_send(state: ChatState, text: str) -> ChatState:
    """Append the user's message and mark the conversation busy.

    Raises:
        ValueError: If the text is blank.
        ConversationBusyError: If a previous send has not finished.
    """
    text = text.strip()
    if not text:
        raise ValueError("Message must not be empty")
    if state.busy:
        raise ConversationBusyError("A reply is still pending")

    message = Message(role=Role.USER, content=text)
    return state.model_copy(update={"messages": (*state.messages, message), "busy": True})


def finish_send(state: ChatState, reply: str | None = None) -> ChatState:
    """Clear the busy flag, appending the assistant reply when there is one.

    A failed or cancelled send passes no reply and leaves the transcript as is.
    """
    messages = state.messages
    if reply is not None:
        messages = (*messages, Message(role=Role.ASSISTANT, content=reply))
    return state.model_copy(update={"messages": messages, "busy": False})


def clear_messages(state: ChatState) -> ChatState:
    """Start a new chat, keeping uploaded contexts and the selection."""
    return state.model_copy(update={"messages": (), "busy": False})
