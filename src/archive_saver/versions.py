"""Save format versions and where each one keeps its version-dependent data."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

CURRENT_EXPORT_VERSION = "2.0.0"

# Key wrapping each screen name change in 1.0.0 saves
SCREEN_NAME_CHANGE_KEY = "screenNameChange"


@dataclass(frozen=True)
class SaveLayout:
    """Shape of one save format version.

    `user_summary_paths` lists the key paths under `info` that may hold the
    classic user summary, tried in order.
    """
    version: str
    user_summary_paths: Tuple[Tuple[str, ...], ...]
    wrapped_screen_name_history: bool = False

    def locate_user_summary(self, info: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """Return the classic user summary stored in a save's info block."""
        for path in self.user_summary_paths:
            node: Any = info
            for key in path:
                if not isinstance(node, Mapping) or key not in node:
                    node = None
                    break
                node = node[key]
            if node is not None:
                return node
        return None


SAVE_LAYOUTS: Dict[str, SaveLayout] = {
    "1.0.0": SaveLayout(
        version="1.0.0",
        user_summary_paths=(("index", "info"), ("info", "user")),
        wrapped_screen_name_history=True,
    ),
    "1.1.0": SaveLayout(
        version="1.1.0",
        user_summary_paths=(("info", "user"),),
    ),
    "2.0.0": SaveLayout(
        version="2.0.0",
        user_summary_paths=(("info", "user"),),
    ),
}

SUPPORTED_SAVE_VERSIONS = tuple(SAVE_LAYOUTS)


def is_supported(version: Optional[str]) -> bool:
    return version in SAVE_LAYOUTS


def get_layout(version: str) -> SaveLayout:
    return SAVE_LAYOUTS[version]
