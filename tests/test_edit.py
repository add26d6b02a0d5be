import json

import pytest

from oaiclient.v1.edit import EditRequest, EditResponse
from oaiclient.v1.errors import APIError


def test_request_leaves_out_unset_fields():
    req = EditRequest(model="m", instruction="fix the spelling")
    assert req.to_payload() == {"model": "m", "instruction": "fix the spelling"}


def test_request_carries_set_fields():
    req = EditRequest(model="m", instruction="fix", input="teh cat", n=2, top_p=0.5)
    payload = req.to_payload()
    assert payload["input"] == "teh cat"
    assert payload["n"] == 2
    assert payload["top_p"] == 0.5
    assert "temperature" not in payload


def test_request_round_trip():
    req = EditRequest(model="m", instruction="fix", input="x", temperature=0.25)
    assert EditRequest.from_payload(req.to_payload()) == req


def test_response_parses_from_json():
    doc = json.dumps(
        {
            "object": "edit",
            "created": 7,
            "usage": {"prompt_tokens": 1, "completion_tokens": 2, "total_tokens": 3},
            "choices": [{"text": "the cat", "index": 0}],
        }
    )
    resp = EditResponse.from_payload(doc)
    assert resp.choices[0].text == "the cat"
    assert resp.usage.total_tokens == 3
    assert EditResponse.from_payload(resp.to_payload()) == resp


def test_response_missing_choices_is_an_error():
    with pytest.raises(APIError):
        EditResponse.from_payload({"object": "edit", "created": 1})