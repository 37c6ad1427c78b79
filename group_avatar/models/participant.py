"""
Participant Model Module
========================
This module defines the Participant class for representing a conversation member.
"""

from dataclasses import dataclass

from group_avatar.utils.text import parse_address


@dataclass(frozen=True)
class Participant:
    """Class representing one conversation participant."""
    identifier: str = ""
    display_label: str = ""

    @property
    def label(self) -> str:
        """Label used for hashing and initials: display label, else identifier."""
        return self.display_label or self.identifier or ""

    @classmethod
    def parse(cls, value: str) -> "Participant":
        """Build a participant from an address string like "Ann <ann@x.com>"."""
        email, name = parse_address(value)
        return cls(identifier=email, display_label=name)

    @classmethod
    def from_pair(cls, pair) -> "Participant":
        """Build a participant from an (identifier, display_label) pair."""
        identifier, display_label = pair
        return cls(identifier=identifier or "", display_label=display_label or "")
