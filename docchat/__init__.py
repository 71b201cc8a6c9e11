"""Document Context Chat - ask questions about your own documents.

Combines NiceGUI for the chat interface, FastAPI for HTTP endpoints,
httpx for the Generative Language API, and Pydantic for data validation.

Components:
    - agent: prompt building and request dispatch with retry on rate limits
    - state: immutable conversation snapshots and their transitions
    - parsing: text and PDF decoding for uploaded documents
    - api: HTTP endpoints mirroring the chat and upload flows
    - ui: Web interface for chat interactions
    - models: Message, context and request/response schemas
"""

__version__ = "0.1.0"
