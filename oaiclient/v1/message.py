"""Thread message requests, message objects and text annotations."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, ClassVar, Literal, Union

from pydantic import Field

from oaiclient.v1.common import ApiModel


class MessageRole(str, Enum):
    USER = "user"
    SYSTEM = "system"
    ASSISTANT = "assistant"
    FUNCTION = "function"


class Tool(ApiModel):
    type: str


class Attachment(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"file_id"})

    file_id: str | None = None
    tools: list[Tool]


class FileCitation(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"quote"})

    file_id: str
    quote: str | None = None


class FilePath(ApiModel):
    file_id: str


class ContentTextAnnotationsFileCitationObject(ApiModel):
    type: Literal["file_citation"] = "file_citation"
    text: str
    file_citation: FileCitation
    start_index: int = Field(ge=0)
    end_index: int = Field(ge=0)


class ContentTextAnnotationsFilePathObject(ApiModel):
    type: Literal["file_path"] = "file_path"
    text: str
    file_path: FilePath
    start_index: int = Field(ge=0)
    end_index: int = Field(ge=0)


ContentTextAnnotations = Annotated[
    Union[ContentTextAnnotationsFileCitationObject, ContentTextAnnotationsFilePathObject],
    Field(discriminator="type"),
]


class ContentText(ApiModel):
    value: str
    annotations: list[ContentTextAnnotations]


class Content(ApiModel):
    content_type: str = Field(alias="type")
    text: ContentText


class CreateMessageRequest(ApiModel):
    role: MessageRole
    content: str
    attachments: list[Attachment] | None = None
    metadata: dict[str, str] | None = None


class ModifyMessageRequest(ApiModel):
    metadata: dict[str, str] | None = None


class MessageObject(ApiModel):
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


class ListMessage(ApiModel):
    object: str
    data: list[MessageObject]
    first_id: str
    last_id: str
    has_more: bool


class MessageFileObject(ApiModel):
    id: str
    object: str
    created_at: int
    message_id: str


class ListMessageFile(ApiModel):
    object: str
    data: list[MessageFileObject]
    first_id: str
    last_id: str
    has_more: bool