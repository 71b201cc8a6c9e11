"""Pytest fixtures and shared test configuration.

Fixtures:
    - chat_config: Dispatcher configuration pointing at a fake host
    - recording_sleep: Backoff sleep that records delays instead of waiting
    - make_dispatcher: Builds a RequestDispatcher over a scripted endpoint
    - sample_pdf_bytes / blank_pdf_bytes: Small PDFs built in memory
"""

import io
from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from pypdf import PdfWriter

from docchat.agent.config import ChatConfig
from docchat.agent.dispatcher import RequestDispatcher
from tests.helpers import SAMPLE_PDF_TEXT, FakeEndpoint, RecordingSleep, build_text_pdf


@pytest.fixture
def chat_config() -> ChatConfig:
    """Configuration with a fake host and no default key."""
    return ChatConfig(
        api_key="",
        base_url="https://generativelanguage.test",
        model_name="test-model",
        request_timeout=5.0,
    )


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
async def make_dispatcher(
    chat_config: ChatConfig,
    recording_sleep: RecordingSleep,
) -> AsyncGenerator[Callable[[FakeEndpoint], RequestDispatcher]]:
    """Factory for dispatchers wired to a FakeEndpoint.

    Yields:
        Callable taking a FakeEndpoint and returning a RequestDispatcher.
    """
    clients: list[httpx.AsyncClient] = []

    def factory(endpoint: FakeEndpoint) -> RequestDispatcher:
        client = httpx.AsyncClient(transport=httpx.MockTransport(endpoint))
        clients.append(client)
        return RequestDispatcher(config=chat_config, client=client, sleep=recording_sleep)

    yield factory

    for client in clients:
        await client.aclose()


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """One-page PDF containing SAMPLE_PDF_TEXT."""
    return build_text_pdf(SAMPLE_PDF_TEXT)


@pytest.fixture
def blank_pdf_bytes() -> bytes:
    """One-page PDF with no text."""
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()
