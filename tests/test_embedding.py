import pytest

from oaiclient.v1.common import TEXT_EMBEDDING_3_SMALL
from oaiclient.v1.embedding import EmbeddingRequest, EmbeddingResponse, EncodingFormat
from oaiclient.v1.errors import APIError


def test_encoding_format_is_sent_as_null_when_unset():
    req = EmbeddingRequest(model=TEXT_EMBEDDING_3_SMALL, input=["story time"])
    assert req.to_payload() == {
        "model": "text-embedding-3-small",
        "input": ["story time"],
        "encoding_format": None,
    }


def test_dimensions_and_format_are_sent_when_set():
    req = EmbeddingRequest(
        model=TEXT_EMBEDDING_3_SMALL,
        input=["story time", "Once upon a time"],
        dimensions=10,
        encoding_format=EncodingFormat.BASE64,
    )
    payload = req.to_payload()
    assert payload["dimensions"] == 10
    assert payload["encoding_format"] == "base64"
    assert "user" not in payload


def test_request_round_trip():
    req = EmbeddingRequest(model="m", input=["a"], user="u", encoding_format=EncodingFormat.FLOAT)
    assert EmbeddingRequest.from_payload(req.to_payload()) == req


def test_response_parses():
    resp = EmbeddingResponse.from_payload(
        {
            "object": "list",
            "data": [{"object": "embedding", "embedding": [0.5, -0.25], "index": 0}],
            "model": "m",
            "usage": {"prompt_tokens": 4, "total_tokens": 4},
        }
    )
    assert resp.data[0].embedding == [0.5, -0.25]
    assert resp.usage.prompt_tokens == resp.usage.total_tokens


def test_unknown_encoding_format_is_rejected():
    with pytest.raises(APIError):
        EmbeddingRequest.from_payload({"model": "m", "input": [], "encoding_format": "hex"})