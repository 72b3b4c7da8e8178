"""
Tests for utility functions.
"""

import unittest

from post_meta.utils.hash_utils import compute_meta_fingerprint, compute_value_hash
from post_meta.utils.serialization import (
    is_serialized,
    maybe_serialize,
    maybe_unserialize,
    slash,
    to_db_value,
    unslash
)


class TestSerialization(unittest.TestCase):
    """Tests for the host value conventions."""

    def test_is_serialized(self):
        """Test is_serialized function."""
        self.assertTrue(is_serialized('{"a": 1}'))
        self.assertTrue(is_serialized("[1, 2]"))
        self.assertTrue(is_serialized('"quoted"'))
        self.assertTrue(is_serialized('  {"a": 1}  '))

        self.assertFalse(is_serialized("plain"))
        self.assertFalse(is_serialized("[not json"))
        self.assertFalse(is_serialized(""))
        self.assertFalse(is_serialized("42"))
        self.assertFalse(is_serialized(42))
        self.assertFalse(is_serialized(None))

    def test_maybe_serialize(self):
        """Test maybe_serialize function."""
        self.assertEqual(maybe_serialize({"a": 1}), '{"a": 1}')
        self.assertEqual(maybe_serialize(["x", "y"]), '["x", "y"]')
        self.assertEqual(maybe_serialize(("x",)), '["x"]')

        # Strings that look serialized get serialized again
        self.assertEqual(maybe_serialize("[1]"), '"[1]"')

        self.assertEqual(maybe_serialize("hello"), "hello")
        self.assertEqual(maybe_serialize(5), 5)

    def test_maybe_unserialize(self):
        """Test maybe_unserialize function."""
        self.assertEqual(maybe_unserialize('{"a": 1}'), {"a": 1})
        self.assertEqual(maybe_unserialize('"[1]"'), "[1]")
        self.assertEqual(maybe_unserialize("hello"), "hello")
        self.assertEqual(maybe_unserialize("[broken"), "[broken")
        self.assertEqual(maybe_unserialize(5), 5)

        for value in ({"nested": [1, "two"]}, "[1]", "hello", ["a"]):
            stored = to_db_value(maybe_serialize(value))
            self.assertEqual(maybe_unserialize(stored), value)

    def test_slash(self):
        """Test slash function."""
        self.assertEqual(slash("it's"), "it\\'s")
        self.assertEqual(slash('say "hi"'), 'say \\"hi\\"')
        self.assertEqual(slash("a\\b"), "a\\\\b")
        self.assertEqual(slash("a\0b"), "a\\0b")
        self.assertEqual(slash("plain"), "plain")

        # Composites are escaped recursively; other scalars are untouched
        self.assertEqual(
            slash(["x'", {"k": "y'"}, 3]),
            ["x\\'", {"k": "y\\'"}, 3]
        )
        self.assertEqual(slash(5), 5)
        self.assertIsNone(slash(None))

    def test_unslash(self):
        """Test unslash function."""
        self.assertEqual(unslash("it\\'s"), "it's")
        self.assertEqual(unslash("a\\0b"), "a\0b")
        self.assertEqual(unslash({"k": ["\\\"q\\\""]}), {"k": ['"q"']})

        for text in ("C:\\dir\\file", 'he said "no"', "it's", "nul\0byte"):
            self.assertEqual(unslash(slash(text)), text)

    def test_to_db_value(self):
        """Test to_db_value function."""
        self.assertEqual(to_db_value(None), "")
        self.assertEqual(to_db_value(True), "1")
        self.assertEqual(to_db_value(False), "")
        self.assertEqual(to_db_value(7), "7")
        self.assertEqual(to_db_value("text"), "text")


class TestHashUtils(unittest.TestCase):
    """Tests for hash utility functions."""

    def test_compute_value_hash(self):
        """Test compute_value_hash function."""
        self.assertEqual(compute_value_hash(""), "empty")
        self.assertEqual(compute_value_hash(None), "empty")

        self.assertEqual(compute_value_hash("red"), compute_value_hash("red"))
        self.assertNotEqual(compute_value_hash("red"), compute_value_hash("Red"))
        self.assertEqual(len(compute_value_hash("red")), 8)

        self.assertEqual(
            compute_value_hash({"a": 1, "b": 2}),
            compute_value_hash({"b": 2, "a": 1})
        )
        self.assertNotEqual(
            compute_value_hash("red", seed=1),
            compute_value_hash("red", seed=2)
        )

    def test_compute_meta_fingerprint(self):
        """Test compute_meta_fingerprint function."""
        meta = {"color": ["red"], "tags": ["a", "b"]}
        fingerprint = compute_meta_fingerprint(meta)
        self.assertEqual(len(fingerprint), 32)

        # Key order does not matter
        reordered = {"tags": ["a", "b"], "color": ["red"]}
        self.assertEqual(compute_meta_fingerprint(reordered), fingerprint)

        # Value order does
        swapped = {"color": ["red"], "tags": ["b", "a"]}
        self.assertNotEqual(compute_meta_fingerprint(swapped), fingerprint)

        # So does multiplicity
        doubled = {"color": ["red"], "tags": ["a", "b", "a", "b"]}
        self.assertNotEqual(compute_meta_fingerprint(doubled), fingerprint)

        self.assertEqual(compute_meta_fingerprint({}), compute_meta_fingerprint({}))


if __name__ == "__main__":
    unittest.main()
