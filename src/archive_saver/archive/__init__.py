from .archive import TwitterArchive
from .messages import Conversation, DMArchive
from .stores import AdArchive, ArchiveLists, FavoriteArchive, TweetArchive
from .user import UserData

__all__ = [
    'TwitterArchive',
    'Conversation',
    'DMArchive',
    'AdArchive',
    'ArchiveLists',
    'FavoriteArchive',
    'TweetArchive',
    'UserData',
]
