"""Text edit requests and responses."""

from __future__ import annotations

from oaiclient.v1.common import ApiModel, Usage


class EditRequest(ApiModel):
    model: str
    input: str | None = None
    instruction: str
    n: int | None = None
    temperature: float | None = None
    top_p: float | None = None


class EditChoice(ApiModel):
    text: str
    index: int


class EditResponse(ApiModel):
    object: str
    created: int
    usage: Usage
    choices: list[EditChoice]