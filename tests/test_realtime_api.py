import json
import socket

import pytest
from websockets.asyncio.server import serve

from oaiclient.realtime.api import WSS_URL, RealtimeClient
from oaiclient.realtime.client_event import InputAudioBufferCommit, to_message


def test_default_endpoint(monkeypatch):
    monkeypatch.delenv("WSS_URL", raising=False)
    client = RealtimeClient("token", "gpt-4o-realtime-preview-2024-10-01")
    assert client.wss_url == WSS_URL
    assert client.url() == f"{WSS_URL}?model=gpt-4o-realtime-preview-2024-10-01"


def test_endpoint_from_environment(monkeypatch):
    monkeypatch.setenv("WSS_URL", "ws://localhost:9000/rt")
    client = RealtimeClient("token", "m")
    assert client.url() == "ws://localhost:9000/rt?model=m"


def test_explicit_endpoint_wins(monkeypatch):
    monkeypatch.setenv("WSS_URL", "ws://localhost:9000/rt")
    client = RealtimeClient("token", "m", wss_url="ws://localhost:1/other")
    assert client.url() == "ws://localhost:1/other?model=m"


def test_headers():
    client = RealtimeClient("token", "m")
    assert client.headers() == {"Authorization": "Bearer token", "OpenAI-Beta": "realtime=v1"}


@pytest.mark.asyncio
async def test_connect_sends_handshake_headers(monkeypatch):
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)

    async def handler(connection):
        received = await connection.recv()
        await connection.send(
            json.dumps(
                {
                    "path": connection.request.path,
                    "authorization": connection.request.headers.get("Authorization"),
                    "beta": connection.request.headers.get("OpenAI-Beta"),
                    "received": received,
                }
            )
        )

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    async with serve(handler, sock=sock):
        client = RealtimeClient("token", "m", wss_url=f"ws://127.0.0.1:{port}/rt")
        connection = await client.connect()
        try:
            message = to_message(InputAudioBufferCommit())
            await connection.send(message)
            reply = json.loads(await connection.recv())
        finally:
            await connection.close()

    assert reply["path"] == "/rt?model=m"
    assert reply["authorization"] == "Bearer token"
    assert reply["beta"] == "realtime=v1"
    assert reply["received"] == message