"""Errors raised by the API client."""

from __future__ import annotations


class APIError(Exception):
    """An error reported by the API or raised while handling its response."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"APIError: {self.message}"


class TransportError(APIError):
    """A failure in the HTTP transport itself: connection, TLS, timeout."""

    def __str__(self) -> str:
        return f"TransportError: {self.message}"