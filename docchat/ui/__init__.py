"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - API key entry
    - Upload of .txt and .pdf documents as contexts
    - Context selection
    - Chat transcript with markdown replies, send and stop controls

Holds a ChatState snapshot per page. All state changes go through the
transition functions in docchat.state.
"""
