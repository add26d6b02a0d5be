# oaiclient

Typed request and response models for OpenAI-compatible APIs, built on
pydantic, plus an asynchronous client for the realtime WebSocket API.

The `oaiclient.v1` sub-package has models for chat and text completions,
edits, embeddings, images, audio (transcription, translation and speech),
files, batches, fine-tuning, moderation, and the assistants, threads, messages
and runs endpoints. The `oaiclient.realtime` sub-package has the realtime
session and item types, the client and server events, and `RealtimeClient`.

## Installation

```
pip install oaiclient
```

## Building a request

Every model derives from `oaiclient.v1.common.ApiModel`. `to_payload()`
returns the JSON-ready dictionary that goes over the wire. Fields left as
`None` are omitted, except for the few the API expects to be sent as `null`.

```python
from oaiclient.v1.chat_completion import (
    ChatCompletionMessage,
    ChatCompletionRequest,
    MessageRole,
)
from oaiclient.v1.common import GPT4_O_MINI

req = ChatCompletionRequest(
    model=GPT4_O_MINI,
    messages=[ChatCompletionMessage(role=MessageRole.USER, content="What is bitcoin?")],
    temperature=0.7,
)
body = req.to_payload()
# {"model": "gpt-4o-mini", "messages": [{"role": "user", "content": "What is bitcoin?"}],
#  "temperature": 0.7}
```

The `content` of a chat message is either a string or a list of `ImageUrl`
parts. An empty string is sent as `null`.

You can set `tool_choice` to a `ToolChoiceType` (`"none"`, `"auto"`,
`"required"`) or to a `ToolChoice` that wraps a `Tool`. A `ToolChoice` is
serialized as that tool's `type` and `function`.

## Reading a response

`from_payload()` accepts a decoded dictionary or raw JSON text or bytes:

```python
from oaiclient.v1.chat_completion import ChatCompletionResponse

result = ChatCompletionResponse.from_payload(response_text)
print(result.choices[0].message.content)
```

If the data does not match the model, `from_payload` raises
`oaiclient.v1.errors.APIError`, and its message begins with
`Failed to parse JSON`.

The following helpers decode tagged unions and pick the variant from the
`type` field:
- `oaiclient.v1.types.parse_tool` for assistant tools
- `oaiclient.realtime.client_event.parse_client_event` for client events
- `oaiclient.realtime.server_event.parse_server_event` for server events

## Errors

`oaiclient.v1.errors.APIError` carries a `message` and prints as
`APIError: <message>`. `TransportError` is a subclass for failures at the
transport level and prints as `TransportError: <message>`.

## Realtime

`RealtimeClient(api_key, model, wss_url=None)` opens a WebSocket to the
realtime endpoint. If `wss_url` is not given, the client uses the `WSS_URL`
environment variable, and falls back to the public endpoint when that is not
set. The `model` is passed as a query parameter. The handshake sends an
`Authorization: Bearer` header and `OpenAI-Beta: realtime=v1`.

```python
import asyncio

from oaiclient.realtime.api import RealtimeClient
from oaiclient.realtime.client_event import ConversationItemCreate, ResponseCreate, to_message
from oaiclient.realtime.server_event import ResponseAudioTranscriptDelta, parse_server_event
from oaiclient.realtime.types import Item


async def main():
    client = RealtimeClient(api_key="placeholder", model="gpt-4o-realtime-preview-2024-10-01")
    conn = await client.connect()
    item = Item.from_payload(
        {"type": "message", "role": "user",
         "content": [{"type": "input_text", "text": "Hello"}]}
    )
    await conn.send(to_message(ConversationItemCreate(item=item)))
    await conn.send(to_message(ResponseCreate()))
    async for frame in conn:
        event = parse_server_event(frame)
        if isinstance(event, ResponseAudioTranscriptDelta):
            print(event.delta, end="")


asyncio.run(main())
```

`to_message` encodes a client event as compact JSON text.
`dump_server_event` does the same for server events.

## What this package does not do

This package has no HTTP client for the v1 endpoints. It builds and validates
request bodies and parses response bodies, but sending them is up to you, with
the HTTP library of your choice. That includes auth headers, the
assistants beta header, multipart uploads for files and audio, and writing
speech audio to `AudioSpeechRequest.output`. The package also has no parser
for server-sent event streams. You decode each streamed chat chunk yourself,
with `ChatCompletionResponseForStream.from_payload`.

## Development

```
pip install -e .[test]
pytest
```