"""Run and run step requests and objects of the assistants API."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from oaiclient.v1.common import ApiModel
from oaiclient.v1.thread import CreateThreadRequest
from oaiclient.v1.types import Tools


class CreateRunRequest(ApiModel):
    assistant_id: str
    model: str | None = None
    instructions: str | None = None
    tools: list[dict[str, str]] | None = None
    metadata: dict[str, str] | None = None
    response_format: Any | None = None


class ModifyRunRequest(ApiModel):
    metadata: dict[str, str] | None = None


class LastError(ApiModel):
    code: str
    message: str


class RunObject(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"instructions"})

    id: str
    object: str
    created_at: int
    thread_id: str
    assistant_id: str
    status: str
    required_action: dict[str, str] | None = None
    last_error: LastError | None = None
    expires_at: int | None = None
    started_at: int | None = None
    cancelled_at: int | None = None
    failed_at: int | None = None
    completed_at: int | None = None
    model: str
    instructions: str | None = None
    tools: list[Tools]
    metadata: dict[str, str]


class ListRun(ApiModel):
    object: str
    data: list[RunObject]
    first_id: str
    last_id: str
    has_more: bool


class CreateThreadAndRunRequest(ApiModel):
    assistant_id: str
    thread: CreateThreadRequest | None = None
    model: str | None = None
    instructions: str | None = None
    tools: list[dict[str, str]] | None = None
    metadata: dict[str, str] | None = None


class RunStepObject(ApiModel):
    id: str
    object: str
    created_at: int
    assistant_id: str
    thread_id: str
    run_id: str
    run_step_type: str = Field(alias="type")
    status: str
    step_details: dict[str, str]
    last_error: LastError | None = None
    expires_at: int | None = None
    started_at: int | None = None
    cancelled_at: int | None = None
    failed_at: int | None = None
    completed_at: int | None = None
    metadata: dict[str, str]


class ListRunStep(ApiModel):
    object: str
    data: list[RunStepObject]
    first_id: str
    last_id: str
    has_more: bool