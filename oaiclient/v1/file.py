"""File upload, listing, retrieval and deletion payloads."""

from __future__ import annotations

from oaiclient.v1.common import ApiModel


class FileData(ApiModel):
    id: str
    object: str
    bytes: int
    created_at: int
    filename: str
    purpose: str


class FileListResponse(ApiModel):
    object: str
    data: list[FileData]


class FileUploadRequest(ApiModel):
    """Upload the local file at path ``file`` for the given purpose."""

    file: str
    purpose: str


class FileUploadResponse(ApiModel):
    id: str
    object: str
    bytes: int
    created_at: int
    filename: str
    purpose: str


class FileDeleteRequest(ApiModel):
    file_id: str


class FileDeleteResponse(ApiModel):
    id: str
    object: str
    delete: bool


class FileRetrieveResponse(ApiModel):
    id: str
    object: str
    bytes: int
    created_at: int
    filename: str
    purpose: str