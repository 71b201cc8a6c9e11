"""Integration tests for the FastAPI app.

Real app, real parsing, real request validation. Only the provider call is
scripted, through a dispatcher dependency override.
"""
