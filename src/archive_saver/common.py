"""Common utilities shared across modules."""

import re
import logging
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional

logger = logging.getLogger(__name__)

EPOCH = datetime.min.replace(tzinfo=timezone.utc)

_YTD_PREFIX = re.compile(r'^window\.[^=]+=\s*')


def clean_json_string(json_string: str) -> str:
    """Remove the `window.YTD.<name>.part0 = ` wrapper of export files."""
    cleaned = _YTD_PREFIX.sub('', json_string.strip())
    return cleaned.rstrip(';')


def parse_twitter_timestamp(ts: Optional[str]) -> Optional[datetime]:
    """Convert an ISO or classic Twitter timestamp to an aware datetime."""
    if not ts:
        return None
    try:
        parsed = datetime.fromisoformat(ts.replace('Z', '+00:00'))
    except ValueError:
        try:
            parsed = datetime.strptime(ts, "%a %b %d %H:%M:%S %z %Y")
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def merge_unique(existing: List[Any], incoming: Iterable[Any]) -> List[Any]:
    """Append items not already present, keeping first-seen order."""
    seen = set(existing)
    for item in incoming:
        if item not in seen:
            seen.add(item)
            existing.append(item)
    return existing
