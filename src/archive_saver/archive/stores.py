"""Record stores held by a TwitterArchive."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)


def _tweet_id(tweet: Dict[str, Any]) -> Optional[str]:
    tweet_id = tweet.get('id_str') or tweet.get('id')
    return str(tweet_id) if tweet_id is not None else None


class TweetArchive:
    """Classic-format tweets, unique by id and kept in load order."""

    def __init__(self):
        self._tweets: List[Dict[str, Any]] = []
        self._index: Dict[str, int] = {}
        # Container this store was restored from, dropped on further loads
        self.packed: Optional[bytes] = None

    def add(self, tweets: Iterable[Dict[str, Any]]) -> None:
        """Add tweets, replacing any already loaded with the same id."""
        self.packed = None
        for tweet in tweets:
            tweet_id = _tweet_id(tweet)
            if tweet_id is None:
                logger.warning(f"Skipping tweet without id: {tweet}")
                continue
            if tweet_id in self._index:
                self._tweets[self._index[tweet_id]] = tweet
            else:
                self._index[tweet_id] = len(self._tweets)
                self._tweets.append(tweet)

    @property
    def all(self) -> List[Dict[str, Any]]:
        return list(self._tweets)

    def __len__(self) -> int:
        return len(self._tweets)


class FavoriteArchive:
    """Liked tweets from a GDPR archive."""

    def __init__(self):
        self._favorites: Dict[str, Dict[str, Any]] = {}

    def add(self, favorites: Iterable[Dict[str, Any]]) -> None:
        """Add favorites; a tweet liked twice is kept once."""
        for favorite in favorites:
            if 'like' in favorite:
                favorite = favorite['like']
            tweet_id = favorite.get('tweetId')
            if not tweet_id:
                logger.warning(f"Skipping favorite without tweetId: {favorite}")
                continue
            self._favorites.setdefault(tweet_id, favorite)

    @property
    def all(self) -> List[Dict[str, Any]]:
        return list(self._favorites.values())

    def __len__(self) -> int:
        return len(self._favorites)


@dataclass
class ArchiveLists:
    """Twitter lists the user created, belongs to, or follows."""
    created: List[str] = field(default_factory=list)
    member_of: List[str] = field(default_factory=list)
    subscribed: List[str] = field(default_factory=list)


@dataclass
class AdArchive:
    """Ad records of a GDPR archive."""
    impressions: List[Dict[str, Any]] = field(default_factory=list)
    engagements: List[Dict[str, Any]] = field(default_factory=list)
    mobile_conversions: List[Dict[str, Any]] = field(default_factory=list)
    online_conversions: List[Dict[str, Any]] = field(default_factory=list)
    packed: Optional[bytes] = field(default=None, repr=False, compare=False)

    def __setattr__(self, name: str, value: Any) -> None:
        # Replacing a collection invalidates the container it came from
        if name != 'packed':
            object.__setattr__(self, 'packed', None)
        object.__setattr__(self, name, value)

    def __len__(self) -> int:
        return (len(self.impressions) + len(self.engagements)
                + len(self.mobile_conversions) + len(self.online_conversions))
