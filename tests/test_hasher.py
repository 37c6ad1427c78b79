"""
Tests for identity hashing.
"""

import itertools
import unittest

from group_avatar.engine.hasher import digest, group_digest, resolve_label
from group_avatar.models.participant import Participant


class TestDigest(unittest.TestCase):
    """Tests for digest()."""

    def test_sums_code_points(self):
        """Test the digest is the sum of character codes."""
        self.assertEqual(digest("Ann"), 65 + 110 + 110)
        self.assertEqual(digest("Bob"), 275)
        self.assertEqual(digest("é"), 233)

    def test_empty_label_is_zero(self):
        """Test empty and missing labels digest to 0."""
        self.assertEqual(digest(""), 0)
        self.assertEqual(digest(None), 0)

    def test_anagrams_collide(self):
        """Test the digest is a plain checksum (kept that way on purpose)."""
        self.assertEqual(digest("ab"), digest("ba"))


class TestGroupDigest(unittest.TestCase):
    """Tests for group_digest()."""

    def setUp(self):
        """Set up test fixtures."""
        self.members = [
            Participant("ann@x.com", "Ann"),
            Participant("bob@x.com", "Bob"),
            Participant("cid@x.com", "Cid"),
            Participant("dee@x.com", ""),
        ]

    def test_order_invariant(self):
        """Test every permutation gives the same group digest."""
        expected = group_digest(self.members)
        for perm in itertools.permutations(self.members):
            self.assertEqual(group_digest(perm), expected)

    def test_uses_identifier_when_label_missing(self):
        """Test the identifier stands in for an empty display label."""
        self.assertEqual(resolve_label(self.members[3]), "dee@x.com")
        self.assertEqual(
            group_digest(self.members),
            285 + 275 + 272 + digest("dee@x.com")
        )

    def test_empty_group(self):
        """Test an empty group digests to 0."""
        self.assertEqual(group_digest([]), 0)
        self.assertEqual(group_digest([Participant()]), 0)


if __name__ == "__main__":
    unittest.main()
