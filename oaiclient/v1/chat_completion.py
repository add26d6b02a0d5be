"""Chat completion requests, responses and streamed chunks."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

from pydantic import field_serializer, field_validator

from oaiclient.v1.common import ApiModel, Usage
from oaiclient.v1.types import Function


class ToolType(str, Enum):
    FUNCTION = "function"


class Tool(ApiModel):
    type: ToolType = ToolType.FUNCTION
    function: Function


class ToolChoiceType(str, Enum):
    NONE = "none"
    AUTO = "auto"
    REQUIRED = "required"


class ToolChoice(ApiModel):
    """Forces the model to call one particular tool."""

    tool: Tool


class MessageRole(str, Enum):
    USER = "user"
    SYSTEM = "system"
    ASSISTANT = "assistant"
    FUNCTION = "function"
    TOOL = "tool"


class ContentType(str, Enum):
    TEXT = "text"
    IMAGE_URL = "image_url"


class ImageUrlType(ApiModel):
    url: str


class ImageUrl(ApiModel):
    type: ContentType
    text: str | None = None
    image_url: ImageUrlType | None = None


class ToolCallFunction(ApiModel):
    name: str | None = None
    arguments: str | None = None


class ToolCall(ApiModel):
    id: str
    type: str
    function: ToolCallFunction


class ChatCompletionMessage(ApiModel):
    """A message sent to the model; content is text or a list of parts."""

    keep_null: ClassVar[frozenset[str]] = frozenset({"content"})

    role: MessageRole
    content: str | list[ImageUrl]
    name: str | None = None
    tool_calls: list[ToolCall] | None = None
    tool_call_id: str | None = None

    @field_validator("content", mode="before")
    @classmethod
    def _null_content_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_serializer("content")
    def _serialize_content(self, value: str | list[ImageUrl]) -> Any:
        if isinstance(value, str):
            return value or None
        return [part.to_payload() for part in value]


class ChatCompletionMessageForResponse(ApiModel):
    role: MessageRole
    content: str | None = None
    reasoning_content: str | None = None
    name: str | None = None
    tool_calls: list[ToolCall] | None = None


class ChatCompletionMessageForStream(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"content"})

    content: str | None = None


class FinishReason(str, Enum):
    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content_filter"
    TOOL_CALLS = "tool_calls"
    NULL = "null"


class FinishDetails(ApiModel):
    type: FinishReason
    stop: str


class ChatCompletionChoice(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"finish_reason", "finish_details"})

    index: int
    message: ChatCompletionMessageForResponse
    finish_reason: FinishReason | None = None
    finish_details: FinishDetails | None = None


class ChatCompletionChoiceForStream(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"finish_reason", "finish_details"})

    index: int
    delta: ChatCompletionMessageForStream
    finish_reason: FinishReason | None = None
    finish_details: FinishDetails | None = None


class ChatCompletionResponse(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"id", "system_fingerprint"})

    id: str | None = None
    object: str
    created: int
    model: str
    choices: list[ChatCompletionChoice]
    usage: Usage
    system_fingerprint: str | None = None


class ChatCompletionResponseForStream(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"id", "system_fingerprint"})

    id: str | None = None
    object: str
    created: int
    model: str
    choices: list[ChatCompletionChoiceForStream]
    system_fingerprint: str | None = None


class ChatCompletionRequest(ApiModel):
    model: str
    messages: list[ChatCompletionMessage]
    temperature: float | None = None
    top_p: float | None = None
    n: int | None = None
    response_format: Any | None = None
    stream: bool | None = None
    stop: list[str] | None = None
    max_tokens: int | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    logit_bias: dict[str, int] | None = None
    user: str | None = None
    seed: int | None = None
    tools: list[Tool] | None = None
    parallel_tool_calls: bool | None = None
    tool_choice: ToolChoiceType | ToolChoice | None = None

    @field_validator("tool_choice", mode="before")
    @classmethod
    def _parse_tool_choice(cls, value: Any) -> Any:
        if isinstance(value, dict) and "tool" not in value:
            return ToolChoice(tool=Tool.model_validate(value))
        return value

    @field_serializer("tool_choice")
    def _serialize_tool_choice(self, value: ToolChoiceType | ToolChoice | None) -> Any:
        if value is None:
            return None
        if isinstance(value, ToolChoice):
            return value.tool.to_payload()
        return value.value