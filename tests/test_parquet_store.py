"""
Tests for the Parquet-backed metadata store.
"""

import os
import shutil
import tempfile
import unittest

import pandas as pd

from post_meta.core import LOCK_KEYS, PostMeta
from post_meta.core.models import PostRecord, RecordClass
from post_meta.storage import ParquetMetaStore
from post_meta.utils.serialization import slash


class TestParquetMetaStore(unittest.TestCase):
    """Tests for ParquetMetaStore."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.storage_path = os.path.join(self.temp_dir, "meta")
        self.store = ParquetMetaStore(self.storage_path)

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_starts_empty(self):
        """A fresh storage path has no metadata and no files."""
        self.assertEqual(self.store.get_metadata(1), {})
        self.assertEqual(self.store.get_metadata_keys(1), [])
        self.assertTrue(self.store.to_dataframe().empty)
        self.assertFalse(os.path.exists(self.storage_path))

    def test_add_update_delete(self):
        """Basic writes follow the multimap semantics."""
        self.store.add_metadata(1, "tags", "a")
        self.store.add_metadata(1, "color", "red")
        self.store.add_metadata(1, "tags", "b")

        self.assertEqual(
            self.store.get_metadata(1),
            {"tags": ["a", "b"], "color": ["red"]}
        )
        self.assertEqual(self.store.get_metadata_keys(1), ["tags", "color"])

        self.assertTrue(self.store.update_metadata(1, "tags", "z"))
        self.assertEqual(self.store.get_metadata(1)["tags"], ["z"])

        self.assertTrue(self.store.update_metadata(1, "size", "L"))
        self.assertEqual(self.store.get_metadata(1)["size"], ["L"])

        self.assertTrue(self.store.delete_metadata(1, "color"))
        self.assertFalse(self.store.delete_metadata(1, "color"))
        self.assertEqual(self.store.get_metadata_keys(1), ["tags", "size"])

    def test_record_ids_are_text(self):
        """Integer and string ids name the same record."""
        self.store.add_metadata(5, "color", "red")
        self.assertEqual(self.store.get_metadata("5"), {"color": ["red"]})

    def test_values_are_stored_in_wire_form(self):
        """Slashed values are unslashed and composites serialized."""
        self.store.add_metadata(1, "dims", slash({"label": "it's", "w": 10}))
        self.store.add_metadata(1, "count", 3)

        df = self.store.to_dataframe()
        self.assertEqual(list(df.columns), ["meta_id", "post_id", "meta_key", "meta_value"])
        self.assertEqual(df["meta_value"].tolist(), ['{"label": "it\'s", "w": 10}', "3"])
        self.assertEqual(df["meta_id"].tolist(), [1, 2])

    def test_save_and_reload(self):
        """Saved tables are loaded by a new store on the same path."""
        self.store.add_metadata(1, "tags", "a")
        self.store.add_metadata(1, "tags", "b")
        self.store.register_record(PostRecord(2, RecordClass.REVISION))

        stats = self.store.save()
        self.assertEqual(stats, {"meta_rows": 2, "records": 1})
        self.assertTrue(os.path.exists(os.path.join(self.storage_path, "postmeta.parquet")))
        self.assertTrue(os.path.exists(os.path.join(self.storage_path, "posts.parquet")))

        reloaded = ParquetMetaStore(self.storage_path)
        self.assertEqual(reloaded.get_metadata(1), {"tags": ["a", "b"]})
        self.assertEqual(reloaded.get_record_class(2), RecordClass.REVISION)

        # Row ids continue after the loaded ones, keeping value order
        reloaded.add_metadata(1, "tags", "c")
        self.assertEqual(reloaded.get_metadata(1), {"tags": ["a", "b", "c"]})
        self.assertEqual(reloaded.to_dataframe()["meta_id"].tolist(), [1, 2, 3])

    def test_register_record_replaces_class(self):
        """Registering a record again replaces its class."""
        self.store.register_record(PostRecord(2, RecordClass.REVISION))
        self.assertTrue(self.store.is_revision(2))

        self.store.register_record(PostRecord(2, RecordClass.POST))
        self.assertFalse(self.store.is_revision(2))
        self.assertEqual(self.store.get_record_class(3), RecordClass.POST)

    def test_missing_columns(self):
        """Tables without the expected columns are refused."""
        os.makedirs(self.storage_path)
        pd.DataFrame({"post_id": ["1"], "value": ["x"]}).to_parquet(
            os.path.join(self.storage_path, "postmeta.parquet"),
            engine="pyarrow",
            index=False
        )

        with self.assertRaises(ValueError):
            ParquetMetaStore(self.storage_path)

    def test_post_meta_over_parquet(self):
        """The copy and delete operations work against this backend."""
        self.store.add_metadata(1, "color", "red")
        self.store.add_metadata(1, "tags", "a")
        self.store.add_metadata(1, "tags", "b")
        self.store.add_metadata(1, "edit-lock", "1700000000:3")
        self.store.add_metadata(2, "color", "blue")
        self.store.add_metadata(2, "tags", "z")

        post_meta = PostMeta(self.store)
        post_meta.copy_all(1, 2, exclude=LOCK_KEYS)
        self.assertEqual(
            self.store.get_metadata(2),
            {"color": ["red"], "tags": ["z", "a", "b"]}
        )

        self.store.register_record(PostRecord(3, RecordClass.REVISION))
        stats = post_meta.copy_all(1, 3)
        self.assertEqual(stats.rejected, stats.writes)
        post_meta.copy_all_to_draft(1, 3)
        self.assertEqual(
            self.store.get_metadata(3),
            {"color": ["red"], "tags": ["a", "b"], "edit-lock": ["1700000000:3"]}
        )

        post_meta.delete_all_from_draft(3, LOCK_KEYS)
        self.assertEqual(self.store.get_metadata(3), {"edit-lock": ["1700000000:3"]})

        post_meta.delete_all(2)
        self.assertEqual(self.store.get_metadata(2), {})


if __name__ == "__main__":
    unittest.main()
