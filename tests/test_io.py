"""
Tests for I/O helpers and the contact-sheet preview.
"""

import json
import os
import shutil
import tempfile
import unittest

from PIL import Image

from group_avatar.utils.io import (
    load_config, load_conversations, save_config, save_results, save_svg,
    split_participants
)
from group_avatar.utils.visualization import create_contact_sheet


class TestIO(unittest.TestCase):
    """Tests for group_avatar.utils.io."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        """Clean up after tests."""
        shutil.rmtree(self.temp_dir)

    def test_split_participants(self):
        """Test ';'-separated cells are split and trimmed."""
        self.assertEqual(split_participants(" Ann <a@x.com> ;; bob@x.com; "), ["Ann <a@x.com>", "bob@x.com"])
        self.assertEqual(split_participants(""), [])

    def test_load_conversations(self):
        """Test a batch CSV gets a parsed participant list."""
        path = os.path.join(self.temp_dir, "batch.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write("conversation_id,participants\n")
            f.write("c1,Ann <a@x.com>;Bob <b@x.com>\n")
            f.write("c2,\n")
        df = load_conversations(path)
        self.assertEqual(list(df["participant_list"]), [["Ann <a@x.com>", "Bob <b@x.com>"], []])

    def test_load_conversations_missing_column(self):
        """Test a CSV without the participants column is rejected."""
        path = os.path.join(self.temp_dir, "batch.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write("conversation_id\nc1\n")
        with self.assertRaises(ValueError):
            load_conversations(path)

    def test_save_files(self):
        """Test SVG, config and result files are written, creating directories."""
        svg_path = save_svg("<svg/>", os.path.join(self.temp_dir, "a", "x.svg"))
        self.assertTrue(svg_path.exists())

        config_path = os.path.join(self.temp_dir, "b", "config.json")
        save_config({"theme": "dark"}, config_path)
        self.assertEqual(load_config(config_path), {"theme": "dark"})

        json_path = save_results([{"conversation_id": "c1"}], os.path.join(self.temp_dir, "r.txt"), format="json")
        with open(json_path, encoding="utf-8") as f:
            self.assertEqual(json.load(f), [{"conversation_id": "c1"}])

        with self.assertRaises(ValueError):
            save_results([], os.path.join(self.temp_dir, "r.xml"), format="xml")

    def test_config_must_be_object(self):
        """Test a JSON config that is not an object is rejected."""
        path = os.path.join(self.temp_dir, "config.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write("[1, 2]")
        with self.assertRaises(ValueError):
            load_config(path)

    def test_contact_sheet(self):
        """Test a contact sheet image is written for a set of avatars."""
        avatars = [(f"c{i}", Image.new("RGBA", (32, 32), (i * 40, 90, 95, 255))) for i in range(5)]
        path = create_contact_sheet(avatars, os.path.join(self.temp_dir, "sheet.png"), columns=3)
        self.assertTrue(path.exists())
        with Image.open(path) as sheet:
            self.assertGreater(sheet.size[0], 0)


if __name__ == "__main__":
    unittest.main()
