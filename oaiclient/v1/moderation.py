"""Content moderation requests and results."""

from __future__ import annotations

from pydantic import Field

from oaiclient.v1.common import ApiModel


class CreateModerationRequest(ApiModel):
    input: str
    model: str | None = None


class ModerationCategories(ApiModel):
    is_hate: bool = Field(alias="hate")
    is_hate_threatening: bool = Field(alias="hate/threatening")
    is_self_harm: bool = Field(alias="self-harm")
    sexual: bool
    is_sexual_minors: bool = Field(alias="sexual/minors")
    violence: bool
    is_violence_graphic: bool = Field(alias="violence/graphic")


class ModerationCategoryScores(ApiModel):
    hate_score: float = Field(alias="hate")
    hate_threatening_score: float = Field(alias="hate/threatening")
    self_harm_score: float = Field(alias="self-harm")
    sexual: float
    sexual_minors_score: float = Field(alias="sexual/minors")
    violence: float
    violence_graphic_score: float = Field(alias="violence/graphic")


class ModerationResult(ApiModel):
    categories: ModerationCategories
    category_scores: ModerationCategoryScores
    flagged: bool


class CreateModerationResponse(ApiModel):
    id: str
    model: str
    results: list[ModerationResult]