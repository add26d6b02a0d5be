import pytest

from oaiclient.v1.errors import APIError
from oaiclient.v1.fine_tuning import (
    CancelFineTuningJobRequest,
    CreateFineTuningJobRequest,
    FineTuningJobError,
    FineTuningJobEvent,
    FineTuningJobObject,
    FineTuningPagination,
    HyperParameters,
    ListFineTuningJobEventsRequest,
    ListFineTuningJobsRequest,
    RetrieveFineTuningJobRequest,
)

JOB_DOC = {
    "id": "ftjob_1",
    "created_at": 1700000000,
    "hyperparameters": {"n_epochs": "auto"},
    "model": "gpt-3.5-turbo",
    "object": "fine_tuning.job",
    "organization_id": "org_1",
    "result_files": [],
    "status": "queued",
    "training_file": "file_train",
}

EVENT_DOC = {
    "id": "ev_1",
    "created_at": 1700000001,
    "level": "info",
    "message": "Job started",
    "object": "fine_tuning.job.event",
}


def test_create_request_omits_unset():
    req = CreateFineTuningJobRequest(model="gpt-3.5-turbo", training_file="file_train")
    assert req.to_payload() == {"model": "gpt-3.5-turbo", "training_file": "file_train"}


def test_create_request_with_hyperparameters():
    req = CreateFineTuningJobRequest(
        model="gpt-3.5-turbo",
        training_file="file_train",
        hyperparameters=HyperParameters(n_epochs="3"),
        suffix="custom",
    )
    payload = req.to_payload()
    assert payload["hyperparameters"] == {"n_epochs": "3"}
    assert payload["suffix"] == "custom"


def test_list_jobs_request_defaults_empty():
    assert ListFineTuningJobsRequest().to_payload() == {}


def test_job_id_requests():
    assert RetrieveFineTuningJobRequest(fine_tuning_job_id="ftjob_1").to_payload() == {
        "fine_tuning_job_id": "ftjob_1"
    }
    assert CancelFineTuningJobRequest(fine_tuning_job_id="ftjob_1").fine_tuning_job_id == "ftjob_1"
    events = ListFineTuningJobEventsRequest(fine_tuning_job_id="ftjob_1", limit=5)
    assert events.to_payload() == {"fine_tuning_job_id": "ftjob_1", "limit": 5}


def test_job_object_keeps_null_optionals():
    job = FineTuningJobObject.from_payload(JOB_DOC)
    assert job.finished_at is None
    payload = job.to_payload()
    assert payload["finished_at"] is None
    assert payload["error"] is None
    assert FineTuningJobObject.from_payload(payload) == job


def test_job_object_with_error():
    doc = dict(JOB_DOC, error={"code": "invalid_file", "message": "bad file"}, status="failed")
    job = FineTuningJobObject.from_payload(doc)
    assert job.error == FineTuningJobError(code="invalid_file", message="bad file")
    assert job.to_payload()["error"]["param"] is None


def test_pagination_of_jobs():
    page = FineTuningPagination[FineTuningJobObject].from_payload(
        {"object": "list", "data": [JOB_DOC], "has_more": False}
    )
    assert isinstance(page.data[0], FineTuningJobObject)
    assert page.data[0].training_file == "file_train"


def test_pagination_of_events():
    page = FineTuningPagination[FineTuningJobEvent].from_payload(
        {"object": "list", "data": [EVENT_DOC], "has_more": True}
    )
    assert page.has_more is True
    assert page.data[0].message == "Job started"


def test_pagination_rejects_bad_items():
    with pytest.raises(APIError):
        FineTuningPagination[FineTuningJobEvent].from_payload(
            {"object": "list", "data": [{"id": "x"}], "has_more": False}
        )