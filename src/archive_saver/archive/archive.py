import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from ..common import merge_unique
from ..versions import CURRENT_EXPORT_VERSION
from .messages import DMArchive
from .stores import AdArchive, ArchiveLists, FavoriteArchive, TweetArchive
from .user import UserData

logger = logging.getLogger(__name__)

# Record wrapper used by GDPR files for each account list
ACCOUNT_RECORD_KEYS = {
    'mutes': 'muting',
    'blocks': 'blocking',
    'followers': 'follower',
    'followings': 'following',
}

AccountRecord = Union[str, Dict[str, Any]]


def _account_ids(records: Iterable[AccountRecord], wrapper: str) -> List[str]:
    """Account ids from plain ids or GDPR records like `{"muting": {"accountId": "1"}}`."""
    ids = []
    for record in records:
        if isinstance(record, dict):
            record = record.get(wrapper, record).get('accountId')
        if record:
            ids.append(str(record))
    return ids


class TwitterArchive:
    """In-memory Twitter archive, filled part by part.

    An archive starts in classic mode; loading any GDPR part (or calling
    `load_archive_part()` with no parts) switches it to GDPR mode for good.
    """

    def __init__(self):
        self.tweets = TweetArchive()
        self.messages: Optional[DMArchive] = None
        self.favorites = FavoriteArchive()
        self.user = UserData()
        self.mutes: List[str] = []
        self.blocks: List[str] = []
        self.followers: List[str] = []
        self.followings: List[str] = []
        self.moments: List[Dict[str, Any]] = []
        self.lists = ArchiveLists()
        self.ads = AdArchive()
        self.source_version = CURRENT_EXPORT_VERSION
        self._is_gdpr = False

    @property
    def is_gdpr(self) -> bool:
        return self._is_gdpr

    def load_classic_archive_part(self, user: Optional[Dict[str, Any]] = None,
                                  tweets: Optional[Iterable[Dict[str, Any]]] = None) -> None:
        """Load classic-format data: the user summary and/or tweets."""
        if user is not None:
            self.user.load_classic(user)
        if tweets is not None:
            self.tweets.add(tweets)
            logger.debug(f"Loaded classic tweets, archive now holds {len(self.tweets)}")

    def load_archive_part(self, dms: Optional[Iterable[Iterable[Dict[str, Any]]]] = None,
                          mutes: Optional[Iterable[AccountRecord]] = None,
                          blocks: Optional[Iterable[AccountRecord]] = None,
                          followers: Optional[Iterable[AccountRecord]] = None,
                          followings: Optional[Iterable[AccountRecord]] = None,
                          moments: Optional[Iterable[Dict[str, Any]]] = None) -> None:
        """Load GDPR-format parts and switch the archive to GDPR mode."""
        if not self._is_gdpr:
            logger.debug("Archive switched to GDPR mode")
        self._is_gdpr = True

        if dms is not None:
            if self.messages is None:
                self.messages = DMArchive()
            self.messages.load(dms)
        for name, records in (('mutes', mutes), ('blocks', blocks),
                              ('followers', followers), ('followings', followings)):
            if records is not None:
                merge_unique(getattr(self, name), _account_ids(records, ACCOUNT_RECORD_KEYS[name]))
        if moments is not None:
            self.moments.extend(moments)

    @property
    def synthetic_info(self) -> Dict[str, Any]:
        """Summary block describing this archive; a fresh dict on each access."""
        return {
            'version': self.source_version,
            'is_gdpr': self.is_gdpr,
            'info': {'user': self.user.summary()},
            'tweet_count': len(self.tweets),
            'dm_count': self.messages.count if self.messages is not None else 0,
        }
