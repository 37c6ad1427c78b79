"""
Partition engine: turns a participant group into avatar cell assignments.
"""

from typing import Iterable, List, Optional, Sequence, Tuple, Union

from group_avatar.cache.color_cache import ConversationColorCache
from group_avatar.core import Profiler
from group_avatar.engine.hasher import group_digest
from group_avatar.engine.layout import DEFAULT_GAP, describe_layout, select_layout
from group_avatar.engine.overflow import DEFAULT_OVERFLOW_MARKER, MAX_CELLS, reduce_overflow
from group_avatar.engine.palette import flat_color
from group_avatar.engine.strategy import ColorStrategy
from group_avatar.engine.zones import pair_colors
from group_avatar.models.color import Color
from group_avatar.models.layout import ResolvedAssignment
from group_avatar.models.participant import Participant
from group_avatar.models.theme import Theme
from group_avatar.utils.logger import get_logger

logger = get_logger(__name__)

ParticipantLike = Union[Participant, Tuple[str, str], str]


def to_participant(value: ParticipantLike) -> Participant:
    """Normalize a Participant, an (identifier, label) pair or an address string."""
    if isinstance(value, Participant):
        return value
    if isinstance(value, tuple):
        return Participant.from_pair(value)
    return Participant.parse(value)


class AvatarEngine:
    """
    Deterministic avatar partitioning and color assignment.

    The same participant content and theme always produce the same cells,
    colors and marker position. When a conversation id is given and a cache
    is attached, the resolved colors are stored for later lookups.
    """

    def __init__(
        self,
        strategy: Union[ColorStrategy, str] = ColorStrategy.ZONED,
        cache: Optional[ConversationColorCache] = None,
        gap: float = DEFAULT_GAP,
        overflow_marker: str = DEFAULT_OVERFLOW_MARKER
    ):
        """
        Initialize the engine.

        Args:
            strategy: Color strategy for two-participant groups
            cache: Conversation color cache to populate and consult
            gap: Inter-cell gap as a fraction of the avatar side
            overflow_marker: Glyph for the overflow cell
        """
        if not 0.0 <= gap < 1.0:
            raise ValueError(f"gap must be in [0, 1), got {gap}")
        self.strategy = ColorStrategy.coerce(strategy)
        self.cache = cache
        self.gap = gap
        self.overflow_marker = overflow_marker

    def partition(
        self,
        participants: Iterable[ParticipantLike],
        theme: Union[Theme, str],
        conversation_id: Optional[str] = None
    ) -> List[ResolvedAssignment]:
        """
        Resolve the avatar cells for a participant group.

        Args:
            participants: Group members; order decides cell placement only
            theme: UI theme whose palette is used
            conversation_id: If given, the result is stored in the cache

        Returns:
            One to four assignments in cell order
        """
        theme = Theme.coerce(theme)
        members = [to_participant(p) for p in participants] or [Participant()]

        with Profiler(f"partition[{len(members)}]"):
            group_hash = group_digest(members)
            count = len(members)
            shown = members[:MAX_CELLS]
            layout = select_layout(count, group_hash, self.gap)
            colors = self._colors(shown, theme)

            assignments = [
                ResolvedAssignment(participant=p, color=c, slot=s, overflow_marker=self.overflow_marker)
                for p, c, s in zip(shown, colors, layout)
            ]
            if count > MAX_CELLS:
                assignments = reduce_overflow(assignments, group_hash, self.overflow_marker)

        logger.debug(
            f"Partitioned {count} participant(s) as {describe_layout(count, group_hash)} "
            f"({theme.value}, {self.strategy.value})"
        )

        if conversation_id is not None and self.cache is not None:
            self.cache.store(conversation_id, assignments)

        return assignments

    def lookup_color(self, conversation_id: str, identifier: str) -> Optional[Color]:
        """Color a previous render chose for `identifier`, or None."""
        if self.cache is None:
            return None
        return self.cache.lookup(conversation_id, identifier)

    def color_for(
        self,
        conversation_id: Optional[str],
        participant: ParticipantLike,
        theme: Union[Theme, str]
    ) -> Color:
        """
        Color for a participant in a conversation, e.g. for a sender name.

        Falls back to the flat single-participant color when the conversation
        has not been rendered yet.
        """
        participant = to_participant(participant)
        if conversation_id is not None:
            color = self.lookup_color(conversation_id, participant.identifier)
            if color is not None:
                return color
        return flat_color(participant.label, theme)

    def _colors(self, shown: Sequence[Participant], theme: Theme) -> List[Color]:
        if len(shown) == 2 and self.strategy is ColorStrategy.ZONED:
            return list(pair_colors(shown[0], shown[1], theme))
        return [flat_color(p.label, theme) for p in shown]
