"""Function definitions, JSON schema fragments and assistant tools."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import Field, TypeAdapter, ValidationError

from oaiclient.v1.common import ApiModel
from oaiclient.v1.errors import APIError


class JSONSchemaType(str, Enum):
    OBJECT = "object"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    NULL = "null"
    BOOLEAN = "boolean"


class JSONSchemaDefine(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"schema_type"})

    schema_type: JSONSchemaType | None = Field(default=None, alias="type")
    description: str | None = None
    enum_values: list[str] | None = None
    properties: dict[str, JSONSchemaDefine] | None = None
    required: list[str] | None = None
    items: JSONSchemaDefine | None = None


class FunctionParameters(ApiModel):
    schema_type: JSONSchemaType = Field(alias="type")
    properties: dict[str, JSONSchemaDefine] | None = None
    required: list[str] | None = None


class Function(ApiModel):
    name: str
    description: str | None = None
    parameters: FunctionParameters


class FileSearchRanker(str, Enum):
    AUTO = "auto"
    DEFAULT_2024_08_21 = "default_2024_08_21"


class FileSearchRankingOptions(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"ranker", "score_threshold"})

    ranker: FileSearchRanker | None = None
    score_threshold: float | None = None


class ToolsFileSearchObject(ApiModel):
    keep_null: ClassVar[frozenset[str]] = frozenset({"max_num_results", "ranking_options"})

    max_num_results: int | None = Field(default=None, ge=0, le=255)
    ranking_options: FileSearchRankingOptions | None = None


class ToolsCodeInterpreter(ApiModel):
    type: Literal["code_interpreter"] = "code_interpreter"


class ToolsFileSearch(ApiModel):
    type: Literal["file_search"] = "file_search"
    file_search: ToolsFileSearchObject | None = None


class ToolsFunction(ApiModel):
    type: Literal["function"] = "function"
    function: Function


Tools = Annotated[
    Union[ToolsCodeInterpreter, ToolsFileSearch, ToolsFunction],
    Field(discriminator="type"),
]

_TOOLS_ADAPTER: TypeAdapter[Any] = TypeAdapter(Tools)


def parse_tool(data: Any) -> ToolsCodeInterpreter | ToolsFileSearch | ToolsFunction:
    """Decode an assistant tool, choosing the variant by its ``type`` tag."""
    try:
        if isinstance(data, (str, bytes, bytearray)):
            return _TOOLS_ADAPTER.validate_json(data)
        return _TOOLS_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise APIError(f"Failed to parse JSON: {exc}") from exc