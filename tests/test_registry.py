#!/usr/bin/env python3
"""
Unit tests for chatroom.server.chat.registry
"""

import unittest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from chatroom.server.chat.registry import Registry


class TestRegistry(unittest.TestCase):
    
    def setUp(self):
        self.registry = Registry()
        self.alice, self.bob, self.carol = object(), object(), object()
        self.registry.insert(self.alice, "Alice")
        self.registry.insert(self.bob, "Bob")
        self.registry.insert(self.carol, "Carol")
    
    def test_lookup_name(self):
        self.assertEqual(self.registry.lookup_name(self.bob), "Bob")
        self.assertIsNone(self.registry.lookup_name(object()))
    
    def test_snapshot_excludes_sender(self):
        self.assertEqual(self.registry.snapshot_excluding(self.alice), {self.bob, self.carol})
    
    def test_snapshot_is_a_copy(self):
        snapshot = self.registry.snapshot_excluding(self.alice)
        self.registry.remove(self.bob)
        self.assertIn(self.bob, snapshot)
    
    def test_remove(self):
        self.assertEqual(self.registry.remove(self.alice), "Alice")
        self.assertNotIn(self.alice, self.registry)
        self.assertEqual(len(self.registry), 2)
    
    def test_remove_missing_is_harmless(self):
        self.assertIsNone(self.registry.remove(object()))
        self.registry.remove(self.alice)
        self.assertIsNone(self.registry.remove(self.alice))
        self.assertEqual(len(self.registry), 2)
    
    def test_insert_same_session_keeps_one_entry(self):
        self.registry.insert(self.alice, "Alicia")
        self.assertEqual(len(self.registry), 3)
        self.assertEqual(self.registry.lookup_name(self.alice), "Alicia")


if __name__ == '__main__':
    unittest.main()
