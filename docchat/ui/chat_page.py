"""NiceGUI chat interface with document contexts."""

import asyncio
import logging

from nicegui import events, ui

from docchat.agent.dispatcher import get_dispatcher
from docchat.agent.errors import DispatchError, MissingCredentialError
from docchat.models.schemas import Message, RetryNotice, Role
from docchat.parsing.documents import (
    ACCEPTED_EXTENSIONS,
    MAX_FILE_SIZE,
    DocumentParseError,
    load_document,
)
from docchat.state.conversation import (
    NO_CONTEXT,
    ChatState,
    add_context,
    clear_messages,
    finish_send,
    select_context,
    selected_context,
    start_send,
)

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: linear-gradient(to bottom, #f9fafb, #f3f4f6); min-height: 100vh; }

    .panel {
        background: rgba(255, 255, 255, 0.8);
        backdrop-filter: blur(12px);
        border: 1px solid #e5e7eb;
        border-radius: 12px;
    }

    .message-user {
        background: #3b82f6;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: #3b82f6;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .message-assistant pre { margin: 0.5rem 0; }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""


class PageSession:
    """Per-page holder for the current state snapshot and the pending request."""

    def __init__(self, api_key: str = "") -> None:
        self.state = ChatState()
        self.api_key = api_key
        self.task: asyncio.Task[str] | None = None
        self.stop_requested = False

    def context_options(self) -> dict[str, str]:
        options = {NO_CONTEXT: "No context"}
        options.update({context.id: context.name for context in self.state.contexts})
        return options


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    dispatcher = get_dispatcher()
    session = PageSession(api_key=dispatcher.config.api_key)

    messages_container: ui.column
    scroll_area: ui.scroll_area
    context_select: ui.select
    input_field: ui.textarea
    send_btn: ui.button
    stop_btn: ui.button

    def render_message(msg: Message) -> None:
        is_user = msg.role == Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align}"):
            with ui.element("div").classes(f"max-w-[80%] px-4 py-3 {bubble}"):
                if is_user:
                    ui.label(msg.content).classes("text-sm whitespace-pre-wrap")
                else:
                    ui.markdown(msg.content).classes("text-sm leading-relaxed")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if not session.state.messages:
                with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                    ui.icon("forum").classes("text-5xl text-gray-300")
                    ui.label("Start a conversation").classes("text-lg text-gray-400")
            else:
                for msg in session.state.messages:
                    render_message(msg)
        scroll_area.scroll_to(percent=1.0)

    def refresh_contexts() -> None:
        context_select.set_options(
            session.context_options(),
            value=session.state.selected_context_id,
        )

    def render_status_indicator() -> tuple[ui.row, ui.label]:
        """Render status indicator with animated dots and status text."""
        with ui.row().classes("w-full justify-start") as row:
            with ui.element("div").classes("message-assistant px-4 py-3"):
                with ui.row().classes("items-center gap-2"):
                    with ui.row().classes("gap-1"):
                        for _ in range(3):
                            ui.element("div").classes("typing-dot")
                    status_label = ui.label("Thinking...").classes(
                        "text-sm text-gray-500 italic"
                    )
        return row, status_label

    def set_busy(busy: bool) -> None:
        send_btn.set_enabled(not busy)
        stop_btn.set_visibility(busy)

    def on_context_change(e: events.ValueChangeEventArguments) -> None:
        session.state = select_context(session.state, e.value)

    async def handle_upload(e: events.UploadEventArguments) -> None:
        name = e.file.name
        data = await e.file.read()
        try:
            document = load_document(name, data)
        except DocumentParseError as err:
            logger.warning(f"Rejected upload {name}: {err}")
            ui.notify(f"Failed to upload {name}: {err}", type="negative")
            return

        session.state, context = add_context(session.state, document.name, document.text)
        refresh_contexts()
        ui.notify(f"Added {context.name} as a context", type="positive")

    async def send_message() -> None:
        text = input_field.value.strip()
        if not text or session.state.busy:
            return

        if not session.api_key.strip():
            ui.notify(MissingCredentialError().message, type="negative")
            return

        context = selected_context(session.state)
        session.state = start_send(session.state, text)
        session.stop_requested = False
        input_field.value = ""
        set_busy(True)
        refresh_messages()

        with messages_container:
            status_row, status_label = render_status_indicator()
        scroll_area.scroll_to(percent=1.0)

        def on_notice(notice: RetryNotice) -> None:
            status_label.set_text(f"Waiting {notice.wait_seconds:g}s (rate limited)...")
            ui.notify(notice.message, type="info")

        session.task = asyncio.create_task(
            dispatcher.dispatch(
                text,
                context=context.content if context else None,
                api_key=session.api_key,
                on_notice=on_notice,
            )
        )

        reply: str | None = None
        try:
            reply = await session.task
        except asyncio.CancelledError:
            if not session.stop_requested:
                raise
            ui.notify("Request cancelled", type="warning")
        except DispatchError as err:
            logger.warning(f"Send failed with {err.kind}: {err.message}")
            ui.notify(err.message, type="negative")
        finally:
            session.task = None
            status_row.delete()
            session.state = finish_send(session.state, reply)
            set_busy(False)
            refresh_messages()

    def stop_message() -> None:
        if session.task is not None and not session.task.done():
            session.stop_requested = True
            session.task.cancel()

    def new_chat() -> None:
        if session.state.busy:
            return
        session.state = clear_messages(session.state)
        refresh_messages()

    # === UI Layout ===
    with ui.element("div").classes("w-full min-h-screen p-4 md:p-8"):
        with ui.row().classes("w-full max-w-6xl mx-auto gap-6 no-wrap items-start"):
            # Settings and contexts
            with ui.column().classes("panel p-6 w-80 shrink-0 gap-4"):
                ui.label("Settings").classes("text-lg font-semibold")
                ui.input(
                    "Google AI API Key",
                    placeholder="Enter your API key",
                    password=True,
                    password_toggle_button=True,
                ).bind_value(session, "api_key").classes("w-full")

                ui.label("Document Context").classes("text-lg font-semibold")
                ui.upload(
                    label="Drop .txt or .pdf files here",
                    on_upload=handle_upload,
                    on_rejected=lambda: ui.notify(
                        "File rejected (max 10MB)", type="negative"
                    ),
                    max_file_size=MAX_FILE_SIZE,
                    multiple=True,
                    auto_upload=True,
                ).props(f'accept="{",".join(ACCEPTED_EXTENSIONS)}"').classes("w-full")

                context_select = ui.select(
                    options=session.context_options(),
                    value=NO_CONTEXT,
                    label="Context",
                    on_change=on_context_change,
                ).classes("w-full")

            # Chat
            with ui.column().classes("panel p-6 flex-grow gap-4").style("height: 600px"):
                with ui.row().classes("w-full items-center justify-between"):
                    ui.label("Chat").classes("text-lg font-semibold")
                    ui.button(icon="add", on_click=new_chat).props("flat round")

                with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
                    messages_container = ui.column().classes("w-full gap-4")
                    refresh_messages()

                with ui.row().classes("w-full gap-2 items-end no-wrap"):
                    input_field = (
                        ui.textarea(placeholder="Type your message...")
                        .props("autogrow outlined dense rows=1")
                        .classes("flex-grow")
                        .on("keydown.enter.prevent", send_message)
                    )
                    send_btn = ui.button("Send", on_click=send_message)
                    stop_btn = ui.button(icon="stop", on_click=stop_message).props(
                        "flat round color=negative"
                    )
                    stop_btn.set_visibility(False)
