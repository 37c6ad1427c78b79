"""
Tests for the conversation color cache.
"""

import threading
import unittest

from group_avatar.cache.color_cache import ConversationColorCache
from group_avatar.core import CONFIG
from group_avatar.engine.hasher import digest
from group_avatar.engine.palette import flat_color
from group_avatar.engine.partition import AvatarEngine
from group_avatar.models.participant import Participant


class TestConversationColorCache(unittest.TestCase):
    """Tests for ConversationColorCache."""

    def setUp(self):
        """Set up test fixtures."""
        self.engine = AvatarEngine()
        self.group = [
            Participant("ann@x.com", "Ann"),
            Participant("bob@x.com", "Bob"),
            Participant("cid@x.com", "Cid"),
        ]
        self.assignments = self.engine.partition(self.group, "light")

    def test_round_trip(self):
        """Test every stored identifier looks up its recorded color."""
        cache = ConversationColorCache()
        entry = cache.store("c1", self.assignments)

        self.assertEqual(entry.participant_order, ("ann@x.com", "bob@x.com", "cid@x.com"))
        for assignment in self.assignments:
            self.assertEqual(cache.lookup("c1", assignment.participant.identifier), assignment.color)

    def test_miss_returns_none(self):
        """Test unknown conversations and identifiers are not errors."""
        cache = ConversationColorCache()
        cache.store("c1", self.assignments)
        self.assertIsNone(cache.lookup("c2", "ann@x.com"))
        self.assertIsNone(cache.lookup("c1", "zed@x.com"))

    def test_last_writer_wins(self):
        """Test a later store replaces the earlier entry."""
        cache = ConversationColorCache()
        cache.store("c1", self.assignments)
        other = self.engine.partition([Participant("zed@x.com", "Zed")], "dark")
        cache.store("c1", other)
        self.assertIsNone(cache.lookup("c1", "ann@x.com"))
        self.assertEqual(cache.lookup("c1", "zed@x.com"), other[0].color)
        self.assertEqual(len(cache), 1)

    def test_lru_eviction(self):
        """Test the least recently used conversation is evicted first."""
        cache = ConversationColorCache(max_conversations=2)
        cache.store("a", self.assignments)
        cache.store("b", self.assignments)
        cache.lookup("a", "ann@x.com")
        cache.store("c", self.assignments)

        self.assertIn("a", cache)
        self.assertNotIn("b", cache)
        self.assertIn("c", cache)

    def test_unbounded(self):
        """Test None disables eviction."""
        cache = ConversationColorCache(max_conversations=None)
        for i in range(1000):
            cache.store(f"c{i}", self.assignments)
        self.assertEqual(len(cache), 1000)

    def test_evict_and_clear(self):
        """Test explicit eviction and clearing."""
        cache = ConversationColorCache()
        cache.store("a", self.assignments)
        cache.store("b", self.assignments)
        self.assertTrue(cache.evict("a"))
        self.assertFalse(cache.evict("a"))
        self.assertIsNotNone(cache.get_entry("b"))
        cache.clear()
        self.assertEqual(len(cache), 0)

    def test_overflow_marker_not_recorded(self):
        """Test the participant behind the marker resolves like other hidden members."""
        group = self.group + [Participant(f"p{i}@x.com", f"P{i}") for i in range(3)]
        assignments = self.engine.partition(group, "dark")
        marker = next(a for a in assignments if a.is_overflow_marker)
        cache = ConversationColorCache()
        engine = AvatarEngine(cache=cache)

        entry = cache.store("c1", assignments)

        self.assertEqual(len(entry.participant_order), 3)
        self.assertNotIn(marker.participant.identifier, entry.participant_order)
        self.assertIsNone(cache.lookup("c1", marker.participant.identifier))
        self.assertEqual(
            engine.color_for("c1", marker.participant, "dark"),
            flat_color(marker.participant.label, "dark"),
        )
        self.assertEqual(
            engine.color_for("c1", group[-1], "dark"),
            flat_color(group[-1].label, "dark"),
        )

    def test_invalid_bound(self):
        """Test a zero bound is rejected."""
        with self.assertRaises(ValueError):
            ConversationColorCache(max_conversations=0)

    def test_concurrent_writers(self):
        """Test concurrent renders of the same conversations leave consistent entries."""
        cache = ConversationColorCache(max_conversations=8)
        engine = AvatarEngine(cache=cache)
        errors = []

        def render(worker):
            try:
                for i in range(200):
                    engine.partition(self.group, "light", conversation_id=f"c{(i + worker) % 12}")
                    cache.lookup(f"c{i % 12}", "bob@x.com")
            except Exception as e:  # collected for the assertion below
                errors.append(e)

        threads = [threading.Thread(target=render, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(errors, [])
        self.assertLessEqual(len(cache), 8)
        expected = [a.color for a in self.assignments]
        for conversation_id in list(cache._entries):
            self.assertEqual(list(cache.get_entry(conversation_id).resolved_palette), expected)


class TestConcurrentPartition(unittest.TestCase):
    """Tests for partitioning many distinct groups from several threads."""

    def setUp(self):
        """Set up test fixtures."""
        self._threshold = CONFIG["memo_threshold"]
        CONFIG["memo_threshold"] = 8
        digest.cache_clear()

    def tearDown(self):
        """Restore the memo threshold."""
        CONFIG["memo_threshold"] = self._threshold
        digest.cache_clear()

    def test_many_labels_across_threads(self):
        """Test partitions stay correct while memoized digests are evicted."""
        engine = AvatarEngine(cache=ConversationColorCache(max_conversations=16))
        bob = Participant("bob@x.com", "Bob")
        errors = []

        def render(worker):
            try:
                for i in range(2000):
                    label = f"U{(i * 7 + worker) % 50}"
                    member = Participant(f"u{worker}{i}@x.com", label)
                    cells = engine.partition([member, bob], "light", conversation_id=f"c{i % 20}")
                    if len(cells) != 2 or digest(label) != sum(ord(ch) for ch in label):
                        errors.append(AssertionError(label))
            except Exception as e:  # collected for the assertion below
                errors.append(e)

        threads = [threading.Thread(target=render, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(errors, [])
        self.assertLessEqual(digest.cache_size(), 8)


if __name__ == "__main__":
    unittest.main()
