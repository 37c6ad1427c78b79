"""
Identity hashing for participants and participant groups.

The digest is the plain sum of character code points. It is a checksum, not
a hash in the cryptographic sense (anagrams collide), and it must stay exactly
this: every existing avatar's layout and colors are derived from it.
"""

from typing import Iterable, Union

from group_avatar.core import memoize
from group_avatar.models.participant import Participant


@memoize
def digest(label: str) -> int:
    """Sum of the code points of every character in `label` (0 for empty)."""
    return sum(ord(ch) for ch in (label or ""))


def resolve_label(participant: Union[Participant, str]) -> str:
    """Display label, falling back to the identifier; plain strings pass through."""
    if isinstance(participant, Participant):
        return participant.label
    return participant or ""


def group_digest(participants: Iterable[Union[Participant, str]]) -> int:
    """Order-independent digest of a participant set."""
    return sum(digest(resolve_label(p)) for p in participants)
