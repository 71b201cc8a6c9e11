"""FastAPI endpoints for document context chat.

Endpoints:
    - GET /health: Service health status
    - POST /chat: One reply for a message, optionally grounded in a context
    - POST /documents: Decode an uploaded .txt or .pdf into context text
"""

from docchat.api.app import app, create_app

__all__ = ["app", "create_app"]
