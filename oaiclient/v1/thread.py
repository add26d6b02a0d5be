"""Thread requests, thread objects and the messages they carry."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import Field

from oaiclient.v1.common import ApiModel


class VectorStores(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset(
        {"file_ids", "chunking_strategy", "metadata"}
    )

    file_ids: list[str] | None = None
    chunking_strategy: str | None = None
    metadata: dict[str, str] | None = None


class FileSearch(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"vector_store_ids", "vector_stores"})

    vector_store_ids: list[str] | None = None
    vector_stores: VectorStores | None = None


class CodeInterpreter(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"file_ids"})

    file_ids: list[str] | None = None


class ToolResource(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"code_interpreter", "file_search"})

    code_interpreter: CodeInterpreter | None = None
    file_search: FileSearch | None = None


class MessageRole(str, Enum):
    USER = "user"
    SYSTEM = "system"
    ASSISTANT = "assistant"
    FUNCTION = "function"


class Tool(ApiModel):
    type: str


class Attachment(ApiModel):
    file_id: str
    tools: list[Tool]


class ContentText(ApiModel):
    value: str
    annotations: list[str]


class Content(ApiModel):
    content_type: str = Field(alias="type")
    text: ContentText


class Message(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"metadata"})

    id: str
    object: str
    created_at: int
    thread_id: str
    role: MessageRole
    content: list[Content]
    assistant_id: str | None = None
    run_id: str | None = None
    attachments: list[Attachment] | None = None
    metadata: dict[str, str] | None = None


class CreateThreadRequest(ApiModel):
    messages: list[Message] | None = None
    tool_resources: ToolResource | None = None
    metadata: dict[str, str] | None = None


class ThreadObject(ApiModel):
    id: str
    object: str
    created_at: int
    metadata: dict[str, str]
    tool_resources: ToolResource | None = None


class ModifyThreadRequest(ApiModel):
    metadata: dict[str, str] | None = None