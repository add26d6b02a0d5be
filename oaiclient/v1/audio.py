"""Speech-to-text, translation and text-to-speech requests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from pydantic import Field

from oaiclient.v1.common import ApiModel

WHISPER_1 = "whisper-1"

TTS_1 = "tts-1"
TTS_1_HD = "tts-1-hd"

VOICE_ALLOY = "alloy"
VOICE_ECHO = "echo"
VOICE_FABLE = "fable"
VOICE_ONYX = "onyx"
VOICE_NOVA = "nova"
VOICE_SHIMMER = "shimmer"


class AudioTranscriptionRequest(ApiModel):
    """Transcribe audio read from ``file`` or held in memory as ``data``.

    ``data`` never appears in the JSON payload; it is sent as the file
    part of the multipart form.
    """

    keep_null: ClassVar[frozenset[str]] = frozenset({"prompt"})

    model: str
    file: str | None = None
    data: bytes | None = Field(default=None, exclude=True)
    prompt: str | None = None
    response_format: str | None = None
    temperature: float | None = None
    language: str | None = None

    @classmethod
    def from_bytes(cls, data: bytes, model: str) -> AudioTranscriptionRequest:
        """Build a request for audio already loaded into memory."""
        return cls(model=model, data=bytes(data))


class AudioTranscriptionResponse(ApiModel):
    text: str


class AudioTranslationRequest(ApiModel):
    file: str
    model: str
    prompt: str | None = None
    response_format: str | None = None
    temperature: float | None = None


class AudioTranslationResponse(ApiModel):
    text: str


class AudioSpeechRequest(ApiModel):
    """Generate speech; the audio is written to the path in ``output``."""

    model: str
    input: str
    voice: str
    output: str


@dataclass(frozen=True)
class AudioSpeechResponse:
    """Outcome of a speech request and the response headers it came with."""

    result: bool
    headers: Mapping[str, str] | None = None