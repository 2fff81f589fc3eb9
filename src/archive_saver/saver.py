"""Create saves from Twitter archives and restore archives from saves."""

import inspect
import logging
from typing import Any, Awaitable, Dict, List, Optional, Union

from tqdm import tqdm

from .archive import TwitterArchive
from .config import SaveOptions
from .container import (
    ADS_DOCUMENT, DM_DOCUMENT, TWEET_DOCUMENT,
    is_container, pack_document, read_document,
)
from .errors import UnsupportedVersionError
from .versions import (
    CURRENT_EXPORT_VERSION, SCREEN_NAME_CHANGE_KEY, SUPPORTED_SAVE_VERSIONS,
    SaveLayout, get_layout, is_supported,
)

logger = logging.getLogger(__name__)

ArchiveSave = Dict[str, Any]

ACCOUNT_FIELDS = ('mutes', 'blocks', 'followers', 'followings', 'moments')
AD_COLLECTIONS = ('impressions', 'engagements', 'online_conversions', 'mobile_conversions')
LIST_KINDS = ('created', 'member_of', 'subscribed')


def is_wrapped_screen_name_history(history: List[Dict[str, Any]]) -> bool:
    """True for the 1.0.0 shape, where each change sits under `screenNameChange`."""
    return bool(history) and isinstance(history[0], dict) and SCREEN_NAME_CHANGE_KEY in history[0]


class ArchiveSaver:
    """Builds saves from archives and restores archives from saves of any supported version."""

    SUPPORTED_SAVE_VERSIONS = SUPPORTED_SAVE_VERSIONS
    CURRENT_EXPORT_VERSION = CURRENT_EXPORT_VERSION

    @classmethod
    def create(cls, archive: TwitterArchive, options: Optional[SaveOptions] = None) -> ArchiveSave:
        """Create a save from a Twitter archive.

        Only the groups selected by `options` are stored; the others are left
        out of the save entirely. Summary user data and screen name history
        are always stored. Restore the result with `restore()`.
        """
        if options is None:
            options = SaveOptions()

        info = dict(archive.synthetic_info)
        info['version'] = cls.CURRENT_EXPORT_VERSION
        save: ArchiveSave = {'info': info}

        if options.tweets:
            save['tweets'] = cls._packed_or(archive.tweets.packed, archive.tweets.all,
                                            TWEET_DOCUMENT, options.packed)

        if options.dms and archive.messages is not None:
            if archive.messages.packed is not None:
                save['dms'] = archive.messages.packed
            else:
                conversations = tqdm(archive.messages.all, desc="Converting conversations",
                                     unit="conversation", disable=not options.progress)
                bundles = [conversation.to_bundle() for conversation in conversations]
                save['dms'] = pack_document(DM_DOCUMENT, bundles) if options.packed else bundles

        for name in ACCOUNT_FIELDS:
            if getattr(options, name):
                save[name] = list(getattr(archive, name))

        if options.lists:
            save['lists'] = {kind: list(getattr(archive.lists, kind)) for kind in LIST_KINDS}

        if options.ad_archive:
            ads = {name: list(getattr(archive.ads, name)) for name in AD_COLLECTIONS}
            save['ad_archive'] = cls._packed_or(archive.ads.packed, ads, ADS_DOCUMENT, options.packed)

        if options.favorites:
            save['favorites'] = archive.favorites.all

        save['screen_name_history'] = list(archive.user.screen_name_history)

        selected = set(options.selected_user_attributes)
        if selected:
            save['user'] = {
                name: value for name, value in archive.user.dump().items()
                if value and name in selected
            }

        logger.info(f"Created save {cls.CURRENT_EXPORT_VERSION} with {', '.join(sorted(save))}")
        return save

    @staticmethod
    def _packed_or(packed: Optional[bytes], data: Any, document: str, pack: bool) -> Any:
        """Reuse the container a store came from, or package/copy its data."""
        if packed is not None:
            return packed
        return pack_document(document, data) if pack else data

    @classmethod
    async def restore(cls, save: Union[ArchiveSave, Awaitable[ArchiveSave]]) -> TwitterArchive:
        """Create a Twitter archive from a save."""
        if inspect.isawaitable(save):
            save = await save

        info = save.get('info') or {}
        version = info.get('version')
        if not is_supported(version):
            logger.error(f"Cannot restore save version {version!r}, "
                         f"supported: {', '.join(cls.SUPPORTED_SAVE_VERSIONS)}")
            raise UnsupportedVersionError(version)
        layout = get_layout(version)

        archive = TwitterArchive()
        archive.source_version = version
        archive.load_classic_archive_part(user=layout.locate_user_summary(info))

        await cls._restore_tweets(archive, save.get('tweets'))

        if info.get('is_gdpr'):
            # Switches the archive to GDPR format
            archive.load_archive_part()

        await cls._restore_dms(archive, save.get('dms'))

        for name in ACCOUNT_FIELDS:
            records = save.get(name)
            if records:
                archive.load_archive_part(**{name: records})

        lists = save.get('lists')
        if lists:
            for kind in LIST_KINDS:
                setattr(archive.lists, kind, list(lists.get(kind) or []))

        await cls._restore_ads(archive, save.get('ad_archive'))

        if save.get('user'):
            archive.user.load_part(save['user'])

        if archive.is_gdpr:
            if save.get('favorites'):
                archive.favorites.add(save['favorites'])
            cls._restore_screen_name_history(archive, save.get('screen_name_history'), layout)
        elif save.get('favorites') or save.get('screen_name_history'):
            logger.debug("Archive is not in GDPR mode, skipping favorites and screen name history")

        logger.info(f"Restored archive from save {version}: {len(archive.tweets)} tweets, "
                    f"{len(archive.messages) if archive.messages else 0} conversations")
        return archive

    @staticmethod
    async def _restore_tweets(archive: TwitterArchive, tweets: Any) -> None:
        if is_container(tweets):
            # Tweets of a previous archive, already converted to classic format
            archive.load_classic_archive_part(tweets=await read_document(tweets, TWEET_DOCUMENT, list))
            archive.tweets.packed = bytes(tweets)
        elif isinstance(tweets, list):
            archive.load_classic_archive_part(tweets=tweets)

    @staticmethod
    async def _restore_dms(archive: TwitterArchive, dms: Any) -> None:
        if is_container(dms):
            dm_file = await read_document(dms, DM_DOCUMENT, list)
            archive.load_archive_part(dms=[dm_file])
            archive.messages.packed = bytes(dms)
        elif isinstance(dms, list):
            archive.load_archive_part(dms=[dms])

    @staticmethod
    async def _restore_ads(archive: TwitterArchive, ad_archive: Any) -> None:
        if ad_archive is None:
            return
        if is_container(ad_archive):
            ads = await read_document(ad_archive, ADS_DOCUMENT, dict)
        else:
            ads = ad_archive
        for name in AD_COLLECTIONS:
            setattr(archive.ads, name, list(ads.get(name) or []))
        if is_container(ad_archive):
            archive.ads.packed = bytes(ad_archive)

    @staticmethod
    def _restore_screen_name_history(archive: TwitterArchive, history: Optional[List[Dict[str, Any]]],
                                     layout: SaveLayout) -> None:
        if history is None:
            return
        wrapped = is_wrapped_screen_name_history(history)
        if history and wrapped != layout.wrapped_screen_name_history:
            logger.debug(f"Screen name history shape differs from what save {layout.version} uses")
        if wrapped:
            history = [entry.get(SCREEN_NAME_CHANGE_KEY, entry) for entry in history]
        archive.user.load_part({'screen_name_history': list(history)})


create_save = ArchiveSaver.create
restore_save = ArchiveSaver.restore
