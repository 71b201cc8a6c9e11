"""Test package for Document Context Chat.

Structure:
    - unit/: Dispatcher, prompts, state transitions, parsing, config
    - integration/: FastAPI endpoints over ASGITransport

The outbound Generative Language API is never contacted: dispatcher tests
run against a scripted httpx.MockTransport endpoint. Leverages pytest with
pytest-check for soft assertions.
"""
