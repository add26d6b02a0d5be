"""Batch job requests and responses."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from oaiclient.v1.common import ApiModel


class Metadata(ApiModel):
    customer_id: str
    batch_description: str


class CreateBatchRequest(ApiModel):
    input_file_id: str
    endpoint: str
    completion_window: str
    metadata: Metadata | None = None


class RequestCounts(ApiModel):
    total: int = Field(ge=0)
    completed: int = Field(ge=0)
    failed: int = Field(ge=0)


class BatchResponse(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset(
        {
            "errors",
            "output_file_id",
            "error_file_id",
            "in_progress_at",
            "expires_at",
            "finalizing_at",
            "completed_at",
            "failed_at",
            "expired_at",
            "cancelling_at",
            "cancelled_at",
            "metadata",
        }
    )

    id: str
    object: str
    endpoint: str
    errors: list[str] | None = None
    input_file_id: str
    completion_window: str
    status: str
    output_file_id: str | None = None
    error_file_id: str | None = None
    created_at: int = Field(ge=0)
    in_progress_at: int | None = Field(default=None, ge=0)
    expires_at: int | None = Field(default=None, ge=0)
    finalizing_at: int | None = Field(default=None, ge=0)
    completed_at: int | None = Field(default=None, ge=0)
    failed_at: int | None = Field(default=None, ge=0)
    expired_at: int | None = Field(default=None, ge=0)
    cancelling_at: int | None = Field(default=None, ge=0)
    cancelled_at: int | None = Field(default=None, ge=0)
    request_counts: RequestCounts
    metadata: Metadata | None = None


class ListBatchResponse(ApiModel):
    object: str
    data: list[BatchResponse]
    first_id: str
    last_id: str
    has_more: bool