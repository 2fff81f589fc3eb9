"""Test fixtures and configuration."""

import pytest

from archive_saver.archive import TwitterArchive


@pytest.fixture
def user_summary():
    return {
        "id": "12345",
        "screen_name": "testuser",
        "name": "Test User",
        "location": "Internet",
        "bio": "Just testing",
        "created_at": "2010-11-04T01:42:54.657Z",
    }


@pytest.fixture
def sample_tweets():
    return [
        {
            "id_str": "1001",
            "created_at": "Wed Feb 28 21:13:12 +0000 2024",
            "text": "Hello world!",
            "in_reply_to_status_id_str": None,
        },
        {
            "id_str": "1002",
            "created_at": "Thu Feb 29 08:00:00 +0000 2024",
            "text": "@friend replying here",
            "in_reply_to_status_id_str": "999",
        },
    ]


@pytest.fixture
def sample_conversation():
    """A GDPR conversation file entry, wrapped as Twitter exports it."""
    return {
        "dmConversation": {
            "conversationId": "12345-67890",
            "messages": [
                {"messageCreate": {
                    "id": "m2", "senderId": "67890", "recipientId": "12345",
                    "text": "hi back", "createdAt": "2024-01-01T10:05:00.000Z",
                }},
                {"messageCreate": {
                    "id": "m1", "senderId": "12345", "recipientId": "67890",
                    "text": "hi", "createdAt": "2024-01-01T10:00:00.000Z",
                }},
            ],
        }
    }


@pytest.fixture
def sample_favorites():
    return [
        {"tweetId": "2001", "fullText": "liked tweet", "expandedUrl": "https://twitter.com/i/web/status/2001"},
        {"tweetId": "2002", "fullText": "another liked tweet", "expandedUrl": "https://twitter.com/i/web/status/2002"},
    ]


@pytest.fixture
def sample_screen_name_history():
    return [
        {"changedAt": "2015-01-01T00:00:00.000Z", "changedFrom": "olduser", "changedTo": "testuser"},
    ]


@pytest.fixture
def sample_ads():
    return {
        "impressions": [{"deviceInfo": {"osType": "Ios"}, "advertiserInfo": {"advertiserName": "Ad Co"}}],
        "engagements": [{"engagementType": "ChargeableImpression"}],
        "online_conversions": [{"conversionEventName": "SiteVisit"}],
        "mobile_conversions": [{"conversionEventName": "Install"}],
    }


@pytest.fixture
def gdpr_archive(user_summary, sample_tweets, sample_conversation, sample_favorites,
                 sample_screen_name_history, sample_ads):
    """A GDPR archive with every group filled."""
    archive = TwitterArchive()
    archive.load_classic_archive_part(user=user_summary, tweets=sample_tweets)
    archive.load_archive_part(
        dms=[[sample_conversation]],
        mutes=[{"muting": {"accountId": "111"}}],
        blocks=["222"],
        followers=[{"follower": {"accountId": "333", "userLink": "https://twitter.com/intent/user?user_id=333"}}],
        followings=["444", "555"],
        moments=[{"momentId": "m-1", "title": "A moment", "tweets": []}],
    )
    archive.lists.created = ["https://twitter.com/testuser/lists/created-list"]
    archive.lists.member_of = ["https://twitter.com/other/lists/member-list"]
    archive.lists.subscribed = []
    for name, records in sample_ads.items():
        setattr(archive.ads, name, list(records))
    archive.favorites.add(sample_favorites)
    archive.user.load_part({
        "phone_number": "+33600000000",
        "verified": False,
        "timezone": "Europe/Paris",
        "screen_name_history": list(sample_screen_name_history),
    })
    return archive


@pytest.fixture
def classic_archive(user_summary, sample_tweets):
    """A classic archive: summary and tweets only, never switched to GDPR mode."""
    archive = TwitterArchive()
    archive.load_classic_archive_part(user=user_summary, tweets=sample_tweets)
    return archive
