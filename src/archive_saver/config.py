"""Configuration classes for archive saves."""

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

# User attributes a save can carry besides the summary and screen name history
USER_ATTRIBUTES = (
    'phone_number',
    'verified',
    'personalization',
    'protected_history',
    'age_info',
    'email_address_changes',
    'login_ips',
    'timezone',
    'applications',
)

GROUPS = (
    'tweets', 'dms', 'mutes', 'favorites', 'blocks',
    'followers', 'followings', 'moments', 'lists', 'ad_archive',
)


@dataclass
class SaveOptions:
    """Selects which parts of an archive go into a save.

    Summary user data and screen name history are always stored.
    """
    tweets: bool = True
    dms: bool = True
    mutes: bool = True
    favorites: bool = True
    blocks: bool = True
    followers: bool = False
    followings: bool = False
    moments: bool = False
    lists: bool = False
    ad_archive: bool = False
    user: Dict[str, bool] = field(default_factory=dict)
    packed: bool = False  # Package tweets, DMs and ads as zip containers
    progress: bool = False  # Show a progress bar while converting DMs

    @property
    def selected_user_attributes(self) -> List[str]:
        """Attribute names listed in `user`; a listed name is selected whatever its value."""
        return list(self.user)

    @classmethod
    def everything(cls) -> 'SaveOptions':
        """Options selecting every group and every known user attribute."""
        options = cls(**{name: True for name in GROUPS})
        options.user = {name: True for name in USER_ATTRIBUTES}
        return options

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to a dictionary for serialization."""
        result = {f.name: getattr(self, f.name) for f in fields(self)}
        result['user'] = dict(self.user)
        return result

    @classmethod
    def from_dict(cls, options_dict: Dict[str, Any]) -> 'SaveOptions':
        """Create SaveOptions from a dictionary, ignoring unknown keys."""
        options = cls()
        known = {f.name for f in fields(options)}
        for key, value in options_dict.items():
            if key not in known:
                logger.warning(f"Ignoring unknown save option: {key}")
                continue
            if key == 'user':
                value = dict(value or {})
            setattr(options, key, value)
        return options
