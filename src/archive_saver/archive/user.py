"""User data of an archive: classic summary, GDPR attributes and screen name history."""

import logging
from typing import Any, Dict, List, Optional

from ..config import USER_ATTRIBUTES

logger = logging.getLogger(__name__)

# Classic archive summary fields (the user block of the classic export index)
SUMMARY_FIELDS = (
    'id', 'screen_name', 'name', 'location', 'bio', 'url',
    'created_at', 'profile_image_url_https', 'full_name',
)


class UserData:
    """Holds every piece of user information an archive carries."""

    def __init__(self):
        self._summary: Dict[str, Any] = {}
        self.phone_number: Optional[str] = None
        self.verified: Optional[bool] = None
        self.personalization: Optional[Dict[str, Any]] = None
        self.protected_history: List[Dict[str, Any]] = []
        self.age_info: Optional[Dict[str, Any]] = None
        self.email_address_changes: List[Dict[str, Any]] = []
        self.login_ips: List[Dict[str, Any]] = []
        self.timezone: Optional[str] = None
        self.applications: List[Dict[str, Any]] = []
        self.screen_name_history: List[Dict[str, Any]] = []

    @property
    def id(self) -> Optional[str]:
        return self._summary.get('id')

    @property
    def screen_name(self) -> Optional[str]:
        return self._summary.get('screen_name')

    @property
    def name(self) -> Optional[str]:
        return self._summary.get('name') or self._summary.get('full_name')

    def load_classic(self, summary: Optional[Dict[str, Any]]) -> None:
        """Load the classic archive user summary."""
        if not summary:
            return
        for key, value in summary.items():
            if key not in SUMMARY_FIELDS:
                logger.debug(f"Ignoring unknown summary field: {key}")
                continue
            self._summary[key] = value

    def load_part(self, part: Dict[str, Any]) -> None:
        """Apply a partial user mapping; keys not supplied are left untouched."""
        for key, value in part.items():
            if key in USER_ATTRIBUTES or key == 'screen_name_history':
                setattr(self, key, value)
            elif key in SUMMARY_FIELDS:
                self._summary[key] = value
            else:
                logger.warning(f"Ignoring unknown user attribute: {key}")

    def summary(self) -> Dict[str, Any]:
        return dict(self._summary)

    def dump(self) -> Dict[str, Any]:
        """Every user attribute by name, summary fields included."""
        data = self.summary()
        for name in USER_ATTRIBUTES:
            data[name] = getattr(self, name)
        data['screen_name_history'] = self.screen_name_history
        return data
