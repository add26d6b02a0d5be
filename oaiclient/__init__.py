"""Typed models for OpenAI-compatible APIs and a realtime WebSocket client."""

__version__ = "0.1.0"