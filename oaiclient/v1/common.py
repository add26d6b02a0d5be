"""Base model, shared payload types and model name constants."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    ValidationError,
    model_serializer,
)

from oaiclient.v1.errors import APIError


def _null_keys(model_cls: type[ApiModel]) -> set[str]:
    fields = model_cls.model_fields
    keys: set[str] = set()
    for name in model_cls.keep_null:
        keys.add(name)
        field = fields.get(name)
        if field is not None and field.alias:
            keys.add(field.alias)
    return keys


class ApiModel(BaseModel):
    """Base for every request and response body.

    Fields whose value is None are left out of the payload, except those
    named in ``keep_null``, which are sent as JSON null.
    """

    model_config = ConfigDict(populate_by_name=True)

    keep_null: ClassVar[frozenset[str]] = frozenset()

    @model_serializer(mode="wrap")
    def serialize_model(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        keep = _null_keys(type(self))
        return {key: value for key, value in data.items() if value is not None or key in keep}

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready dictionary sent over the wire."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_payload(cls, data: Any) -> Any:
        """Build an instance from a decoded dictionary or a JSON document."""
        try:
            if isinstance(data, (str, bytes, bytearray)):
                return cls.model_validate_json(data)
            return cls.model_validate(data)
        except ValidationError as exc:
            raise APIError(f"Failed to parse JSON: {exc}") from exc


class Usage(ApiModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class EmptyRequestBody(ApiModel):
    """A body with no fields, sent where the API expects an empty object."""


GPT4_5_PREVIEW = "gpt-4.5-preview"
GPT4_5_PREVIEW_2025_02_27 = "gpt-4.5-preview-2025-02-27"

O1_PREVIEW = "o1-preview"
O1_PREVIEW_2024_09_12 = "o1-preview-2024-09-12"
O1_MINI = "o1-mini"
O1_MINI_2024_09_12 = "o1-mini-2024-09-12"

GPT4_O_MINI = "gpt-4o-mini"
GPT4_O_MINI_2024_07_18 = "gpt-4o-mini-2024-07-18"

GPT4_O = "gpt-4o"
GPT4_O_2024_05_13 = "gpt-4o-2024-05-13"
GPT4_O_2024_08_06 = "gpt-4o-2024-08-06"
GPT4_O_LATEST = "chatgpt-4o-latest"

GPT3_5_TURBO_1106 = "gpt-3.5-turbo-1106"
GPT3_5_TURBO = "gpt-3.5-turbo"
GPT3_5_TURBO_16K = "gpt-3.5-turbo-16k"
GPT3_5_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
GPT3_5_TURBO_0613 = "gpt-3.5-turbo-0613"
GPT3_5_TURBO_16K_0613 = "gpt-3.5-turbo-16k-0613"
GPT3_5_TURBO_0301 = "gpt-3.5-turbo-0301"

GPT4_0125_PREVIEW = "gpt-4-0125-preview"
GPT4_TURBO_PREVIEW = "gpt-4-turbo-preview"
GPT4_1106_PREVIEW = "gpt-4-1106-preview"
GPT4_VISION_PREVIEW = "gpt-4-vision-preview"
GPT4 = "gpt-4"
GPT4_32K = "gpt-4-32k"
GPT4_0613 = "gpt-4-0613"
GPT4_32K_0613 = "gpt-4-32k-0613"
GPT4_0314 = "gpt-4-0314"
GPT4_32K_0314 = "gpt-4-32k-0314"

DALL_E_2 = "dall-e-2"
DALL_E_3 = "dall-e-3"

TEXT_EMBEDDING_3_SMALL = "text-embedding-3-small"
TEXT_EMBEDDING_3_LARGE = "text-embedding-3-large"
TEXT_EMBEDDING_ADA_002 = "text-embedding-ada-002"