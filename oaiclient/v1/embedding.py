"""Embedding requests and responses."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from oaiclient.v1.common import ApiModel


class EncodingFormat(str, Enum):
    FLOAT = "float"
    BASE64 = "base64"


class EmbeddingRequest(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"encoding_format"})

    model: str
    input: list[str]
    encoding_format: EncodingFormat | None = None
    dimensions: int | None = None
    user: str | None = None


class EmbeddingData(ApiModel):
    object: str
    embedding: list[float]
    index: int


class Usage(ApiModel):
    prompt_tokens: int
    total_tokens: int


class EmbeddingResponse(ApiModel):
    object: str
    data: list[EmbeddingData]
    model: str
    usage: Usage