"""Unit tests for individual components in isolation.

Coverage:
    - agent/: Request dispatch, retry policy, prompt building, config
    - state/: Conversation snapshot transitions
    - parsing/: Text decoding and PDF extraction
"""
