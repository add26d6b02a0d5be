"""Websocket client for the realtime API."""

from __future__ import annotations

import os

from websockets.asyncio.client import ClientConnection, connect

WSS_URL = "wss://api.openai.com/v1/realtime"


class RealtimeClient:
    """Opens authenticated websocket connections to the realtime endpoint.

    Without an explicit ``wss_url`` the ``WSS_URL`` environment variable is
    used, falling back to the public endpoint.
    """

    def __init__(self, api_key: str, model: str, wss_url: str | None = None) -> None:
        if wss_url is None:
            wss_url = os.environ.get("WSS_URL", WSS_URL)
        self.wss_url = wss_url
        self.api_key = api_key
        self.model = model

    def url(self) -> str:
        """The websocket URL, including the model query parameter."""
        return f"{self.wss_url}?model={self.model}"

    def headers(self) -> dict[str, str]:
        """Headers sent with the opening handshake."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "OpenAI-Beta": "realtime=v1",
        }

    async def connect(self) -> ClientConnection:
        """Open the connection; it both sends and receives messages."""
        return await connect(self.url(), additional_headers=self.headers())