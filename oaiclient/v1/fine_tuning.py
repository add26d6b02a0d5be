"""Fine-tuning job requests, job objects and events."""

from __future__ import annotations

from typing import ClassVar, Generic, TypeVar

from oaiclient.v1.common import ApiModel

T = TypeVar("T")


class HyperParameters(ApiModel):
    batch_size: str | None = None
    learning_rate_multiplier: str | None = None
    n_epochs: str | None = None


class CreateFineTuningJobRequest(ApiModel):
    model: str
    training_file: str
    hyperparameters: HyperParameters | None = None
    suffix: str | None = None
    validation_file: str | None = None


class ListFineTuningJobsRequest(ApiModel):
    after: str | None = None
    limit: int | None = None


class ListFineTuningJobEventsRequest(ApiModel):
    fine_tuning_job_id: str
    after: str | None = None
    limit: int | None = None


class RetrieveFineTuningJobRequest(ApiModel):
    fine_tuning_job_id: str


class CancelFineTuningJobRequest(ApiModel):
    fine_tuning_job_id: str


class FineTuningPagination(ApiModel, Generic[T]):
    """One page of a list of jobs or events."""

    object: str
    data: list[T]
    has_more: bool


class FineTuningJobError(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"param"})

    code: str
    message: str
    param: str | None = None


class FineTuningJobObject(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset(
        {"error", "fine_tuned_model", "finished_at", "trained_tokens", "validation_file"}
    )

    id: str
    created_at: int
    error: FineTuningJobError | None = None
    fine_tuned_model: str | None = None
    finished_at: str | None = None
    hyperparameters: HyperParameters
    model: str
    object: str
    organization_id: str
    result_files: list[str]
    status: str
    trained_tokens: int | None = None
    training_file: str
    validation_file: str | None = None


class FineTuningJobEvent(ApiModel):
    id: str
    created_at: int
    level: str
    message: str
    object: str