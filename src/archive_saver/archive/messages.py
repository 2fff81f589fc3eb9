"""Direct message conversations of a GDPR archive."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

import orjson

from ..common import EPOCH, parse_twitter_timestamp

logger = logging.getLogger(__name__)

MESSAGE_CREATE = 'messageCreate'
CONVERSATION_WRAPPER = 'dmConversation'


def _event_kind(event: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
    """Split a GDPR event `{kind: body}` into its kind and body."""
    kind, body = next(iter(event.items()))
    return kind, body


def _event_key(kind: str, body: Dict[str, Any]) -> Tuple[str, str]:
    if body.get('id'):
        return kind, str(body['id'])
    return kind, orjson.dumps(body, option=orjson.OPT_SORT_KEYS).decode('utf-8')


def _event_time(event: Dict[str, Any]):
    _, body = _event_kind(event)
    return parse_twitter_timestamp(body.get('createdAt')) or EPOCH


@dataclass
class Conversation:
    """One DM conversation: its messages plus group events (joins, renames...)."""
    id: str
    messages: List[Dict[str, Any]] = field(default_factory=list)
    events: List[Dict[str, Any]] = field(default_factory=list)
    _seen: Set[Tuple[str, str]] = field(default_factory=set, repr=False, compare=False)

    def add_events(self, events: Iterable[Dict[str, Any]]) -> None:
        """Sort raw GDPR events into messages and other events."""
        for event in events:
            if not isinstance(event, dict) or len(event) != 1:
                logger.warning(f"Skipping malformed event in conversation {self.id}")
                continue
            kind, body = _event_kind(event)
            key = _event_key(kind, body)
            if key in self._seen:
                continue
            self._seen.add(key)
            if kind == MESSAGE_CREATE:
                self.messages.append(body)
            else:
                self.events.append(event)

    def flattened_events(self) -> List[Dict[str, Any]]:
        """All events as GDPR records, de-duplicated, in chronological order."""
        seen = set()
        merged = []
        candidates = [{MESSAGE_CREATE: message} for message in self.messages] + self.events
        for event in candidates:
            kind, body = _event_kind(event)
            key = _event_key(kind, body)
            if key in seen:
                continue
            seen.add(key)
            merged.append(event)
        # Stable, so same-instant events keep their load order
        return sorted(merged, key=_event_time)

    def to_bundle(self) -> Dict[str, Any]:
        return {'conversationId': self.id, 'messages': self.flattened_events()}


class DMArchive:
    """All conversations loaded from one or more DM files."""

    def __init__(self):
        self._conversations: Dict[str, Conversation] = {}
        # Container this store was restored from, dropped on further loads
        self.packed: Optional[bytes] = None

    def load(self, files: Iterable[Iterable[Dict[str, Any]]]) -> None:
        """Load DM files, each a list of conversation bundles.

        Bundles may carry the GDPR `dmConversation` wrapper or not.
        """
        self.packed = None
        for dm_file in files:
            for bundle in dm_file:
                if CONVERSATION_WRAPPER in bundle:
                    bundle = bundle[CONVERSATION_WRAPPER]
                conversation_id = bundle.get('conversationId')
                if not conversation_id:
                    logger.warning("Skipping conversation without conversationId")
                    continue
                conversation = self._conversations.get(conversation_id)
                if conversation is None:
                    conversation = self._conversations[conversation_id] = Conversation(id=conversation_id)
                conversation.add_events(bundle.get('messages', []))

    def get(self, conversation_id: str) -> Optional[Conversation]:
        return self._conversations.get(conversation_id)

    @property
    def all(self) -> List[Conversation]:
        return list(self._conversations.values())

    @property
    def count(self) -> int:
        """Number of messages across all conversations."""
        return sum(len(c.messages) for c in self._conversations.values())

    def __len__(self) -> int:
        return len(self._conversations)
