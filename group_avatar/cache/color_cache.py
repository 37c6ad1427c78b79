"""
Conversation color cache.

Remembers, per conversation, which color the last avatar render gave each
participant so other views (for example the sender name in a message bubble)
can reuse it. Entries are pure functions of their input, so concurrent writers
for the same conversation store identical content and the last write wins.
"""

import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from group_avatar.models.color import Color
from group_avatar.models.layout import ResolvedAssignment
from group_avatar.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_CONVERSATIONS = 512


@dataclass(frozen=True)
class ConversationColorCacheEntry:
    """
    Colors resolved for one conversation, aligned with participant_order.

    Only participants drawn in a cell are recorded. The participant hidden
    behind the overflow marker is left out like every other hidden member,
    so all of them resolve to their flat color.
    """
    conversation_id: str
    resolved_palette: Tuple[Color, ...]
    participant_order: Tuple[str, ...]

    def color_of(self, identifier: str) -> Optional[Color]:
        for ident, color in zip(self.participant_order, self.resolved_palette):
            if ident == identifier:
                return color
        return None


class ConversationColorCache:
    """
    Thread-safe, LRU-bounded map of conversation id to resolved colors.

    Create one per application session and hand it to whatever needs it.
    """

    def __init__(self, max_conversations: Optional[int] = DEFAULT_MAX_CONVERSATIONS):
        """
        Initialize the cache.

        Args:
            max_conversations: Maximum number of conversations kept, least
                recently used first out. None keeps everything.
        """
        if max_conversations is not None and max_conversations < 1:
            raise ValueError("max_conversations must be at least 1 or None")
        self.max_conversations = max_conversations
        self._entries: "OrderedDict[str, ConversationColorCacheEntry]" = OrderedDict()
        self._lock = threading.RLock()

    def store(self, conversation_id: str, assignments: Iterable[ResolvedAssignment]) -> ConversationColorCacheEntry:
        """
        Record the colors of a finished partition, replacing any prior entry.

        Returns:
            The stored entry
        """
        shown = [a for a in assignments if not a.is_overflow_marker]
        entry = ConversationColorCacheEntry(
            conversation_id=conversation_id,
            resolved_palette=tuple(a.color for a in shown),
            participant_order=tuple(a.participant.identifier for a in shown),
        )

        with self._lock:
            self._entries[conversation_id] = entry
            self._entries.move_to_end(conversation_id)
            self._evict_overflow()

        return entry

    def lookup(self, conversation_id: str, identifier: str) -> Optional[Color]:
        """
        Color recorded for `identifier` in `conversation_id`.

        Returns:
            The color, or None when the conversation was never rendered in
            this process or the identifier was not part of the render
        """
        with self._lock:
            entry = self._entries.get(conversation_id)
            if entry is None:
                return None
            self._entries.move_to_end(conversation_id)

        return entry.color_of(identifier)

    def get_entry(self, conversation_id: str) -> Optional[ConversationColorCacheEntry]:
        with self._lock:
            return self._entries.get(conversation_id)

    def evict(self, conversation_id: str) -> bool:
        """Drop one conversation. Returns True if it was present."""
        with self._lock:
            return self._entries.pop(conversation_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, conversation_id: object) -> bool:
        with self._lock:
            return conversation_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _evict_overflow(self) -> None:
        if self.max_conversations is None:
            return
        while len(self._entries) > self.max_conversations:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted conversation colors for {evicted}")
