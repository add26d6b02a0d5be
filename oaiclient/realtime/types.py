"""Sessions, conversation items and responses of the realtime API."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import Field

from oaiclient.v1.common import ApiModel

_U32 = Annotated[int, Field(ge=0, le=0xFFFFFFFF)]
_U16 = Annotated[int, Field(ge=0, le=0xFFFF)]


class RealtimeVoice(str, Enum):
    ALLOY = "alloy"
    ASH = "ash"
    BALLAD = "ballad"
    CORAL = "coral"
    ECHO = "echo"
    SAGE = "sage"
    SHIMMER = "shimmer"
    VERSE = "verse"


class AudioFormat(str, Enum):
    PCM16 = "pcm16"
    G711_ULAW = "g711_ulaw"
    G711_ALAW = "g711_alaw"


class AudioTranscription(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"language", "model", "prompt"})

    language: str | None = None
    model: str | None = None
    prompt: str | None = None


class ServerVAD(ApiModel):
    """Server-side voice activity detection."""

    type: Literal["server_vad"] = "server_vad"
    threshold: float
    prefix_padding_ms: _U32
    silence_duration_ms: _U32


class FunctionToolDefinition(ApiModel):
    type: Literal["function"] = "function"
    name: str
    description: str
    parameters: Any


class ToolChoiceMode(str, Enum):
    AUTO = "auto"
    NONE = "none"
    REQUIRED = "required"


class FunctionType(str, Enum):
    FUNCTION = "function"


class FunctionToolChoice(ApiModel):
    """Forces the model to call the named function."""

    type: FunctionType = FunctionType.FUNCTION
    name: str


MaxOutputTokens = Union[_U16, Literal["inf"]]


class Session(ApiModel):
    modalities: list[str] | None = None
    instructions: str | None = None
    voice: RealtimeVoice | None = None
    input_audio_format: AudioFormat | None = None
    output_audio_format: AudioFormat | None = None
    input_audio_transcription: AudioTranscription | None = None
    turn_detection: ServerVAD | None = None
    tools: list[FunctionToolDefinition] | None = None
    tool_choice: ToolChoiceMode | FunctionToolChoice | None = None
    temperature: float | None = None
    max_output_tokens: MaxOutputTokens | None = None


class ItemType(str, Enum):
    MESSAGE = "message"
    FUNCTION_CALL = "function_call"
    FUNCTION_CALL_OUTPUT = "function_call_output"


class ItemStatus(str, Enum):
    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    INCOMPLETE = "incomplete"


class ItemRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ItemContentType(str, Enum):
    INPUT_TEXT = "input_text"
    INPUT_AUDIO = "input_audio"
    TEXT = "text"
    AUDIO = "audio"


class ItemContent(ApiModel):
    type: ItemContentType
    text: str | None = None
    audio: str | None = None
    transcript: str | None = None


class Item(ApiModel):
    id: str | None = None
    type: ItemType | None = None
    status: ItemStatus | None = None
    role: ItemRole | None = None
    content: list[ItemContent] | None = None
    call_id: str | None = None
    name: str | None = None
    arguments: str | None = None
    output: str | None = None


class APIError(ApiModel):
    """An error object as the realtime server reports it."""

    keep_null: ClassVar[frozenset[str]] = frozenset({"code", "param", "event_id"})

    type: str
    code: str | None = None
    message: str
    param: str | None = None
    event_id: str | None = None


class Conversation(ApiModel):
    id: str
    object: str


class Usage(ApiModel):
    total_tokens: _U32
    input_tokens: _U32
    output_tokens: _U32


class ResponseStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"
    INCOMPLETE = "incomplete"


class CancelledReason(str, Enum):
    TURN_DETECTED = "turn_detected"
    CLIENT_CANCELLED = "client_cancelled"


class IncompleteReason(str, Enum):
    INTERRUPTION = "interruption"
    MAX_OUTPUT_TOKENS = "max_output_tokens"
    CONTENT_FILTER = "content_filter"


class FailedError(ApiModel):
    code: str
    message: str


class CancelledStatusDetail(ApiModel):
    type: Literal["cancelled"] = "cancelled"
    reason: CancelledReason


class IncompleteStatusDetail(ApiModel):
    type: Literal["incomplete"] = "incomplete"
    reason: IncompleteReason


class FailedStatusDetail(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"error"})

    type: Literal["failed"] = "failed"
    error: FailedError | None = None


ResponseStatusDetail = Annotated[
    Union[CancelledStatusDetail, IncompleteStatusDetail, FailedStatusDetail],
    Field(discriminator="type"),
]


class Response(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"status_details", "usage"})

    id: str
    object: str
    status: ResponseStatus
    status_details: ResponseStatusDetail | None = None
    output: list[Item]
    usage: Usage | None = None


class TextContentPart(ApiModel):
    type: Literal["text"] = "text"
    text: str


class AudioContentPart(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"audio"})

    type: Literal["audio"] = "audio"
    audio: str | None = None
    transcript: str


ContentPart = Annotated[
    Union[TextContentPart, AudioContentPart],
    Field(discriminator="type"),
]


class RateLimit(ApiModel):
    name: str
    limit: _U32
    remaining: _U32
    reset_seconds: float