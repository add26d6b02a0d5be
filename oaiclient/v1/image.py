"""Image generation, edit and variation payloads."""

from __future__ import annotations

from oaiclient.v1.common import ApiModel


class ImageData(ApiModel):
    url: str


class ImageGenerationRequest(ApiModel):
    prompt: str
    model: str | None = None
    n: int | None = None
    size: str | None = None
    response_format: str | None = None
    user: str | None = None


class ImageGenerationResponse(ApiModel):
    created: int
    data: list[ImageData]


class ImageEditRequest(ApiModel):
    image: str
    mask: str | None = None
    prompt: str
    model: str | None = None
    n: int | None = None
    size: str | None = None
    response_format: str | None = None
    user: str | None = None


class ImageEditResponse(ApiModel):
    created: int
    data: list[ImageData]


class ImageVariationRequest(ApiModel):
    image: str
    n: int | None = None
    model: str | None = None
    size: str | None = None
    response_format: str | None = None
    user: str | None = None


class ImageVariationResponse(ApiModel):
    created: int
    data: list[ImageData]