"""Events the realtime server sends to the client."""

from __future__ import annotations

import json
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import Field, TypeAdapter, ValidationError

from oaiclient.realtime import types
from oaiclient.realtime.types import ContentPart, Conversation, Item, RateLimit, Response, Session
from oaiclient.v1.common import ApiModel
from oaiclient.v1 import errors

_U32 = Annotated[int, Field(ge=0, le=0xFFFFFFFF)]


class Error(ApiModel):
    type: Literal["error"] = "error"
    event_id: str
    error: types.APIError


class SessionCreated(ApiModel):
    type: Literal["session.created"] = "session.created"
    event_id: str
    session: Session


class SessionUpdated(ApiModel):
    type: Literal["session.updated"] = "session.updated"
    event_id: str
    session: Session


class ConversationCreated(ApiModel):
    type: Literal["conversation.created"] = "conversation.created"
    event_id: str
    conversation: Conversation


class InputAudioBufferCommited(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"previous_item_id"})

    type: Literal["input_audio_buffer.committed"] = "input_audio_buffer.committed"
    event_id: str
    previous_item_id: str | None = None
    item_id: str


class InputAudioBufferCleared(ApiModel):
    type: Literal["input_audio_buffer.cleared"] = "input_audio_buffer.cleared"
    event_id: str


class InputAudioBufferSpeechStarted(ApiModel):
    type: Literal["input_audio_buffer.speech_started"] = "input_audio_buffer.speech_started"
    event_id: str
    audio_start_ms: _U32
    item_id: str


class InputAudioBufferSpeechStopped(ApiModel):
    type: Literal["input_audio_buffer.speech_stopped"] = "input_audio_buffer.speech_stopped"
    event_id: str
    audio_end_ms: _U32
    item_id: str


class ConversationItemCreated(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"previous_item_id"})

    type: Literal["conversation.item.created"] = "conversation.item.created"
    event_id: str
    previous_item_id: str | None = None
    item: Item


class ConversationItemInputAudioTranscriptionCompleted(ApiModel):
    type: Literal["conversation.item.input_audio_transcription.completed"] = (
        "conversation.item.input_audio_transcription.completed"
    )
    event_id: str
    item_id: str
    content_index: _U32
    transcript: str


class ConversationItemInputAudioTranscriptionFailed(ApiModel):
    type: Literal["conversation.item.input_audio_transcription.failed"] = (
        "conversation.item.input_audio_transcription.failed"
    )
    event_id: str
    item_id: str
    content_index: _U32
    error: types.APIError


class ConversationItemTruncated(ApiModel):
    type: Literal["conversation.item.truncated"] = "conversation.item.truncated"
    event_id: str
    item_id: str
    content_index: _U32
    audio_end_ms: _U32


class ConversationItemDeleted(ApiModel):
    type: Literal["conversation.item.deleted"] = "conversation.item.deleted"
    event_id: str
    item_id: str


class ResponseCreated(ApiModel):
    type: Literal["response.created"] = "response.created"
    event_id: str
    response: Response


class ResponseDone(ApiModel):
    type: Literal["response.done"] = "response.done"
    event_id: str
    response: Response


class ResponseOutputItemAdded(ApiModel):
    type: Literal["response.output_item.added"] = "response.output_item.added"
    event_id: str
    response_id: str
    output_index: _U32
    item: Item


class ResponseOutputItemDone(ApiModel):
    type: Literal["response.output_item.done"] = "response.output_item.done"
    event_id: str
    response_id: str
    output_index: _U32
    item: Item


class ResponseContentPartAdded(ApiModel):
    type: Literal["response.content_part.added"] = "response.content_part.added"
    event_id: str
    response_id: str
    item_id: str
    output_index: _U32
    content_index: _U32
    part: ContentPart


class ResponseContentPartDone(ApiModel):
    type: Literal["response.content_part.done"] = "response.content_part.done"
    event_id: str
    response_id: str
    item_id: str
    output_index: _U32
    content_index: _U32
    part: ContentPart


class ResponseTextDelta(ApiModel):
    type: Literal["response.text.delta"] = "response.text.delta"
    event_id: str
    response_id: str
    item_id: str
    output_index: _U32
    content_index: _U32
    delta: str


class ResponseTextDone(ApiModel):
    type: Literal["response.text.done"] = "response.text.done"
    event_id: str
    response_id: str
    item_id: str
    output_index: _U32
    content_index: _U32
    text: str


class ResponseAudioTranscriptDelta(ApiModel):
    type: Literal["response.audio_transcript.delta"] = "response.audio_transcript.delta"
    event_id: str
    response_id: str
    item_id: str
    output_index: _U32
    content_index: _U32
    delta: str


class ResponseAudioTranscriptDone(ApiModel):
    type: Literal["response.audio_transcript.done"] = "response.audio_transcript.done"
    event_id: str
    response_id: str
    item_id: str
    output_index: _U32
    content_index: _U32
    transcript: str


class ResponseAudioDelta(ApiModel):
    type: Literal["response.audio.delta"] = "response.audio.delta"
    event_id: str
    response_id: str
    item_id: str
    output_index: _U32
    content_index: _U32
    delta: str


class ResponseAudioDone(ApiModel):
    type: Literal["response.audio.done"] = "response.audio.done"
    event_id: str
    response_id: str
    item_id: str
    output_index: _U32
    content_index: _U32


class ResponseFunctionCallArgumentsDelta(ApiModel):
    type: Literal["response.function_call_arguments.delta"] = (
        "response.function_call_arguments.delta"
    )
    event_id: str
    response_id: str
    item_id: str
    output_index: _U32
    call_id: str
    delta: str


class ResponseFunctionCallArgumentsDone(ApiModel):
    type: Literal["response.function_call_arguments.done"] = (
        "response.function_call_arguments.done"
    )
    event_id: str
    response_id: str
    item_id: str
    output_index: _U32
    call_id: str
    arguments: str


class RateLimitsUpdated(ApiModel):
    type: Literal["rate_limits.updated"] = "rate_limits.updated"
    event_id: str
    rate_limits: list[RateLimit]


ServerEvent = Annotated[
    Union[
        Error,
        SessionCreated,
        SessionUpdated,
        ConversationCreated,
        InputAudioBufferCommited,
        InputAudioBufferCleared,
        InputAudioBufferSpeechStarted,
        InputAudioBufferSpeechStopped,
        ConversationItemCreated,
        ConversationItemInputAudioTranscriptionCompleted,
        ConversationItemInputAudioTranscriptionFailed,
        ConversationItemTruncated,
        ConversationItemDeleted,
        ResponseCreated,
        ResponseDone,
        ResponseOutputItemAdded,
        ResponseOutputItemDone,
        ResponseContentPartAdded,
        ResponseContentPartDone,
        ResponseTextDelta,
        ResponseTextDone,
        ResponseAudioTranscriptDelta,
        ResponseAudioTranscriptDone,
        ResponseAudioDelta,
        ResponseAudioDone,
        ResponseFunctionCallArgumentsDelta,
        ResponseFunctionCallArgumentsDone,
        RateLimitsUpdated,
    ],
    Field(discriminator="type"),
]

_SERVER_EVENT_ADAPTER: TypeAdapter[Any] = TypeAdapter(ServerEvent)


def parse_server_event(data: Any) -> Any:
    """Decode a server event, choosing its class by the ``type`` tag."""
    try:
        if isinstance(data, (str, bytes, bytearray)):
            return _SERVER_EVENT_ADAPTER.validate_json(data)
        return _SERVER_EVENT_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise errors.APIError(f"Failed to parse JSON: {exc}") from exc


def dump_server_event(event: ApiModel) -> str:
    """Encode a server event as JSON text."""
    return json.dumps(event.to_payload(), separators=(",", ":"), ensure_ascii=False)