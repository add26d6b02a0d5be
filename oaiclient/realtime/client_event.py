"""Events the client sends to the realtime server."""

from __future__ import annotations

import json
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import Field, TypeAdapter, ValidationError

from oaiclient.realtime.types import Item, Session
from oaiclient.v1.common import ApiModel
from oaiclient.v1.errors import APIError

_U32 = Annotated[int, Field(ge=0, le=0xFFFFFFFF)]


class SessionUpdate(ApiModel):
    type: Literal["session.update"] = "session.update"
    event_id: str | None = None
    session: Session = Field(default_factory=Session)


class InputAudioBufferAppend(ApiModel):
    type: Literal["input_audio_buffer.append"] = "input_audio_buffer.append"
    event_id: str | None = None
    audio: str = ""


class InputAudioBufferCommit(ApiModel):
    type: Literal["input_audio_buffer.commit"] = "input_audio_buffer.commit"
    event_id: str | None = None


class InputAudioBufferClear(ApiModel):
    type: Literal["input_audio_buffer.clear"] = "input_audio_buffer.clear"
    event_id: str | None = None


class ConversationItemCreate(ApiModel):
    type: Literal["conversation.item.create"] = "conversation.item.create"
    event_id: str | None = None
    previous_item_id: str | None = None
    item: Item = Field(default_factory=Item)


class ConversationItemTruncate(ApiModel):
    type: Literal["conversation.item.truncate"] = "conversation.item.truncate"
    event_id: str | None = None
    item_id: str = ""
    content_index: _U32 = 0
    audio_end_ms: _U32 = 0


class ConversationItemDelete(ApiModel):
    type: Literal["conversation.item.delete"] = "conversation.item.delete"
    event_id: str | None = None
    item_id: str = ""


class ResponseCreate(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"response"})

    type: Literal["response.create"] = "response.create"
    event_id: str | None = None
    response: Session | None = None


class ResponseCancel(ApiModel):
    type: Literal["response.cancel"] = "response.cancel"
    event_id: str | None = None


ClientEvent = Annotated[
    Union[
        SessionUpdate,
        InputAudioBufferAppend,
        InputAudioBufferCommit,
        InputAudioBufferClear,
        ConversationItemCreate,
        ConversationItemTruncate,
        ConversationItemDelete,
        ResponseCreate,
        ResponseCancel,
    ],
    Field(discriminator="type"),
]

_CLIENT_EVENT_ADAPTER: TypeAdapter[Any] = TypeAdapter(ClientEvent)


def to_message(event: ApiModel) -> str:
    """Encode a client event as the text of a websocket message."""
    return json.dumps(event.to_payload(), separators=(",", ":"), ensure_ascii=False)


def parse_client_event(data: Any) -> Any:
    """Decode a client event, choosing its class by the ``type`` tag."""
    try:
        if isinstance(data, (str, bytes, bytearray)):
            return _CLIENT_EVENT_ADAPTER.validate_json(data)
        return _CLIENT_EVENT_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise APIError(f"Failed to parse JSON: {exc}") from exc