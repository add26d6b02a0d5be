"""Assistant requests, assistant objects and assistant files."""

from __future__ import annotations

from typing import ClassVar

from oaiclient.v1.common import ApiModel
from oaiclient.v1.types import Tools


class VectorStores(ApiModel):
    file_ids: list[str] | None = None
    chunking_strategy: str | None = None
    metadata: dict[str, str] | None = None


class FileSearch(ApiModel):
    vector_store_ids: list[str] | None = None
    vector_stores: VectorStores | None = None


class CodeInterpreter(ApiModel):
    file_ids: list[str] | None = None


class ToolResource(ApiModel):
    code_interpreter: CodeInterpreter | None = None
    file_search: FileSearch | None = None


class AssistantRequest(ApiModel):
    model: str
    name: str | None = None
    description: str | None = None
    instructions: str | None = None
    tools: list[dict[str, str]] | None = None
    tool_resources: ToolResource | None = None
    metadata: dict[str, str] | None = None


class AssistantObject(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"metadata"})

    id: str
    object: str
    created_at: int
    name: str | None = None
    description: str | None = None
    model: str
    instructions: str | None = None
    tools: list[Tools]
    tool_resources: ToolResource | None = None
    metadata: dict[str, str] | None = None


class DeletionStatus(ApiModel):
    id: str
    object: str
    deleted: bool


class ListAssistant(ApiModel):
    object: str
    data: list[AssistantObject]


class AssistantFileRequest(ApiModel):
    file_id: str


class AssistantFileObject(ApiModel):
    id: str
    object: str
    created_at: int
    assistant_id: str


class ListAssistantFile(ApiModel):
    object: str
    data: list[AssistantFileObject]