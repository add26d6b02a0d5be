import json

import pytest

from oaiclient.realtime.client_event import (
    ConversationItemCreate,
    ConversationItemDelete,
    ConversationItemTruncate,
    InputAudioBufferAppend,
    InputAudioBufferClear,
    InputAudioBufferCommit,
    ResponseCancel,
    ResponseCreate,
    SessionUpdate,
    parse_client_event,
    to_message,
)
from oaiclient.realtime.types import Item, ItemContentType, ItemRole, ItemType, Session
from oaiclient.v1.errors import APIError


def test_commit_message_has_only_type():
    assert to_message(InputAudioBufferCommit()) == '{"type":"input_audio_buffer.commit"}'


def test_default_response_create_keeps_null_response():
    decoded = json.loads(to_message(ResponseCreate()))
    assert decoded == {"type": "response.create", "response": None}


def test_event_id_included_when_set():
    decoded = json.loads(to_message(InputAudioBufferClear(event_id="evt_1")))
    assert decoded == {"type": "input_audio_buffer.clear", "event_id": "evt_1"}


def test_type_tag_comes_first():
    message = to_message(InputAudioBufferAppend(audio="AAAA"))
    assert message.startswith('{"type":"input_audio_buffer.append"')


def test_item_create_from_payload():
    item = Item.from_payload(
        {
            "type": "message",
            "role": "user",
            "content": [{"type": "input_text", "text": "hello"}],
        }
    )
    decoded = json.loads(to_message(ConversationItemCreate(item=item)))
    assert decoded["type"] == "conversation.item.create"
    assert decoded["item"]["role"] == "user"
    assert decoded["item"]["content"] == [{"type": "input_text", "text": "hello"}]
    assert "previous_item_id" not in decoded


@pytest.mark.parametrize(
    "event",
    [
        SessionUpdate(session=Session(instructions="be brief")),
        InputAudioBufferAppend(audio="AAAA", event_id="e1"),
        InputAudioBufferCommit(),
        InputAudioBufferClear(),
        ConversationItemCreate(previous_item_id="prev"),
        ConversationItemTruncate(item_id="item", content_index=1, audio_end_ms=250),
        ConversationItemDelete(item_id="item"),
        ResponseCreate(response=Session(temperature=0.5)),
        ResponseCancel(),
    ],
)
def test_round_trip(event):
    assert parse_client_event(to_message(event)) == event


def test_parse_picks_class_by_tag():
    event = parse_client_event({"type": "conversation.item.delete", "item_id": "abc"})
    assert isinstance(event, ConversationItemDelete)
    assert event.item_id == "abc"


def test_parsed_item_fields():
    event = parse_client_event(
        '{"type":"conversation.item.create","item":{"type":"message","role":"user",'
        '"content":[{"type":"input_text","text":"hi"}]}}'
    )
    assert event.item.type is ItemType.MESSAGE
    assert event.item.role is ItemRole.USER
    assert event.item.content[0].type is ItemContentType.INPUT_TEXT


def test_unknown_type_raises():
    with pytest.raises(APIError):
        parse_client_event({"type": "not.an.event"})


def test_negative_truncate_index_rejected():
    with pytest.raises(APIError):
        parse_client_event(
            {"type": "conversation.item.truncate", "item_id": "x", "content_index": -1}
        )