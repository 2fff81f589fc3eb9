"""Tests for DM conversations and their flattening."""

from archive_saver.archive import DMArchive


def _message(message_id, created_at, sender="1", recipient="2"):
    return {"messageCreate": {
        "id": message_id, "senderId": sender, "recipientId": recipient,
        "text": message_id, "createdAt": created_at,
    }}


def test_load_wrapped_and_plain_bundles(sample_conversation):
    dms = DMArchive()
    dms.load([[sample_conversation], [{"conversationId": "other", "messages": [_message("x", "2024-01-02T00:00:00.000Z")]}]])

    assert len(dms) == 2
    assert dms.count == 3
    assert dms.get("other").messages[0]["id"] == "x"


def test_same_conversation_merges_without_duplicates(sample_conversation):
    dms = DMArchive()
    dms.load([[sample_conversation], [sample_conversation]])

    assert len(dms) == 1
    assert dms.count == 2


def test_flattened_events_merge_group_events_chronologically():
    join = {"joinConversation": {"initiatingUserId": "3", "participantsSnapshot": ["1", "2"],
                                 "createdAt": "2024-01-01T10:02:00.000Z"}}
    rename = {"conversationNameUpdate": {"initiatingUserId": "1", "name": "Group",
                                         "createdAt": "2024-01-01T09:00:00.000Z"}}
    dms = DMArchive()
    dms.load([[{"conversationId": "g", "messages": [
        _message("b", "2024-01-01T10:05:00.000Z"),
        join,
        _message("a", "2024-01-01T10:00:00.000Z"),
        rename,
        join,
    ]}]])

    conversation = dms.get("g")
    flattened = conversation.flattened_events()

    assert [next(iter(e)) for e in flattened] == [
        "conversationNameUpdate", "messageCreate", "joinConversation", "messageCreate",
    ]
    assert conversation.to_bundle()["conversationId"] == "g"


def test_bundle_without_id_is_skipped():
    dms = DMArchive()
    dms.load([[{"messages": []}]])

    assert len(dms) == 0
