import pytest

from oaiclient.v1.errors import APIError
from oaiclient.v1.file import (
    FileDeleteRequest,
    FileDeleteResponse,
    FileListResponse,
    FileRetrieveResponse,
    FileUploadRequest,
    FileUploadResponse,
)

FILE_DOC = {
    "id": "file_abc",
    "object": "file",
    "bytes": 120,
    "created_at": 1700000000,
    "filename": "batch_request.json",
    "purpose": "batch",
}


def test_upload_request_payload():
    req = FileUploadRequest(file="data/batch_request.json", purpose="batch")
    assert req.to_payload() == {"file": "data/batch_request.json", "purpose": "batch"}


def test_delete_request_payload():
    assert FileDeleteRequest(file_id="file_abc").to_payload() == {"file_id": "file_abc"}


def test_upload_response_round_trip():
    resp = FileUploadResponse.from_payload(FILE_DOC)
    assert resp.bytes == 120
    assert resp.to_payload() == FILE_DOC


def test_retrieve_response_from_json():
    import json

    resp = FileRetrieveResponse.from_payload(json.dumps(FILE_DOC))
    assert resp.filename == "batch_request.json"
    assert resp.purpose == "batch"


def test_list_response_holds_files():
    listing = FileListResponse.from_payload({"object": "list", "data": [FILE_DOC, FILE_DOC]})
    assert len(listing.data) == 2
    assert all(item.id == "file_abc" for item in listing.data)


def test_delete_response_uses_delete_key():
    resp = FileDeleteResponse.from_payload({"id": "file_abc", "object": "file", "delete": True})
    assert resp.delete is True
    assert resp.to_payload() == {"id": "file_abc", "object": "file", "delete": True}


def test_missing_field_raises():
    doc = dict(FILE_DOC)
    del doc["filename"]
    with pytest.raises(APIError):
        FileRetrieveResponse.from_payload(doc)