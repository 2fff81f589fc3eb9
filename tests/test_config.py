"""Tests for save options and the version table."""

from archive_saver.config import GROUPS, USER_ATTRIBUTES, SaveOptions
from archive_saver.versions import SAVE_LAYOUTS, SUPPORTED_SAVE_VERSIONS, CURRENT_EXPORT_VERSION, is_supported


def test_default_options():
    options = SaveOptions()

    assert [name for name in GROUPS if getattr(options, name)] == ["tweets", "dms", "mutes", "favorites", "blocks"]
    assert options.user == {}
    assert not options.packed


def test_everything():
    options = SaveOptions.everything()

    assert all(getattr(options, name) for name in GROUPS)
    assert options.selected_user_attributes == list(USER_ATTRIBUTES)


def test_from_dict_ignores_unknown_keys():
    options = SaveOptions.from_dict({"tweets": False, "lists": True, "user": {"timezone": True}, "bogus": 1})

    assert not options.tweets
    assert options.lists
    assert options.selected_user_attributes == ["timezone"]
    assert not hasattr(options, "bogus")


def test_to_dict_round_trip():
    options = SaveOptions(followers=True, user={"verified": True})

    assert SaveOptions.from_dict(options.to_dict()) == options


def test_version_table():
    assert SUPPORTED_SAVE_VERSIONS == ("1.0.0", "1.1.0", "2.0.0")
    assert CURRENT_EXPORT_VERSION in SUPPORTED_SAVE_VERSIONS
    assert not is_supported("0.9.0")
    assert not is_supported(None)


def test_layout_locates_user_summary():
    legacy = SAVE_LAYOUTS["1.0.0"]
    current = SAVE_LAYOUTS["2.0.0"]

    assert legacy.locate_user_summary({"index": {"info": {"id": "1"}}}) == {"id": "1"}
    assert legacy.locate_user_summary({"info": {"user": {"id": "2"}}}) == {"id": "2"}
    assert current.locate_user_summary({"index": {"info": {"id": "1"}}}) is None
    assert current.locate_user_summary({"info": {"user": {"id": "2"}}}) == {"id": "2"}


def test_listed_user_attribute_is_selected_even_when_false():
    options = SaveOptions(user={"phone_number": False, "timezone": True})

    assert options.selected_user_attributes == ["phone_number", "timezone"]
