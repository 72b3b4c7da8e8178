"""
Parquet-backed metadata store.
"""

import logging
from typing import Any, Dict, List, Optional

import fsspec
import pandas as pd

from post_meta.core import MetaStore
from post_meta.core.models import PostRecord, RecordClass, RecordId


logger = logging.getLogger(__name__)


META_COLUMNS = ["meta_id", "post_id", "meta_key", "meta_value"]
POSTS_COLUMNS = ["post_id", "record_class"]


class ParquetMetaStore(MetaStore):
    """
    Metadata store backed by pandas tables persisted as Parquet.

    The postmeta table holds one row per stored value; the posts table
    holds the class of every registered record. Both are loaded on
    construction when present and written back by save(). Record ids
    are kept as text, so 5 and "5" name the same record.
    """

    def __init__(
        self,
        storage_path: str,
        meta_file: str = "postmeta.parquet",
        posts_file: str = "posts.parquet",
        storage_options: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the Parquet metadata store.

        Args:
            storage_path: Directory (local path or fsspec URL) holding the tables
            meta_file: File name of the postmeta table
            posts_file: File name of the posts table
            storage_options: Extra options for the fsspec filesystem
        """
        self.storage_path = storage_path
        self.fs, root = fsspec.core.url_to_fs(storage_path, **(storage_options or {}))
        self._root = root.rstrip("/")
        self.meta_path = f"{self._root}/{meta_file}"
        self.posts_path = f"{self._root}/{posts_file}"

        self._meta = self._load(self.meta_path, META_COLUMNS)
        self._posts = self._load(self.posts_path, POSTS_COLUMNS)
        self._last_id = int(self._meta["meta_id"].max()) if not self._meta.empty else 0

    def _empty_table(self, columns: List[str]) -> pd.DataFrame:
        return pd.DataFrame({
            column: pd.Series(dtype="int64" if column == "meta_id" else "object")
            for column in columns
        })

    def _load(self, path: str, columns: List[str]) -> pd.DataFrame:
        if not self.fs.exists(path):
            return self._empty_table(columns)

        with self.fs.open(path, "rb") as f:
            df = pd.read_parquet(f, engine="pyarrow")

        missing = [column for column in columns if column not in df.columns]
        if missing:
            raise ValueError(f"Table {path} is missing columns: {', '.join(missing)}")

        logger.info(f"Loaded {len(df)} rows from {path}")
        return df[columns].reset_index(drop=True)

    def save(self) -> Dict[str, int]:
        """
        Write both tables to the storage path.

        Returns:
            Dictionary with the number of rows written per table
        """
        self.fs.makedirs(self._root, exist_ok=True)
        for path, df in ((self.meta_path, self._meta), (self.posts_path, self._posts)):
            with self.fs.open(path, "wb") as f:
                df.to_parquet(f, engine="pyarrow", index=False)

        logger.info(f"Saved {len(self._meta)} meta rows and {len(self._posts)} records to {self.storage_path}")
        return {"meta_rows": len(self._meta), "records": len(self._posts)}

    def to_dataframe(self) -> pd.DataFrame:
        """Get a copy of the postmeta table ordered by meta_id."""
        return self._meta.sort_values("meta_id", kind="stable").reset_index(drop=True)

    def _append(self, df: pd.DataFrame, row: Dict[str, Any]) -> pd.DataFrame:
        new_row = pd.DataFrame([row], columns=list(df.columns))
        if df.empty:
            return new_row
        return pd.concat([df, new_row], ignore_index=True)

    def _rows_for(self, record_id: RecordId, key: Optional[str] = None) -> pd.DataFrame:
        mask = self._meta["post_id"] == str(record_id)
        if key is not None:
            mask &= self._meta["meta_key"] == key
        return self._meta[mask].sort_values("meta_id", kind="stable")

    def register_record(self, record: PostRecord) -> None:
        post_id = str(record.record_id)
        self._posts = self._posts[self._posts["post_id"] != post_id]
        self._posts = self._append(self._posts, {
            "post_id": post_id,
            "record_class": record.record_class.value
        })

    def get_record_class(self, record_id: RecordId) -> RecordClass:
        match = self._posts[self._posts["post_id"] == str(record_id)]
        if match.empty:
            return RecordClass.POST
        return RecordClass(match["record_class"].iloc[-1])

    def get_metadata(self, record_id: RecordId) -> Dict[str, List[Any]]:
        meta: Dict[str, List[Any]] = {}
        rows = self._rows_for(record_id)
        for key, value in zip(rows["meta_key"], rows["meta_value"]):
            meta.setdefault(key, []).append(value)
        return meta

    def get_metadata_keys(self, record_id: RecordId) -> List[str]:
        return self._rows_for(record_id)["meta_key"].drop_duplicates().tolist()

    def update_metadata(self, record_id: RecordId, key: str, value: Any) -> bool:
        rows = self._rows_for(record_id, key)
        if rows.empty:
            self._insert(record_id, key, value)
            return True

        self._meta.at[rows.index[0], "meta_value"] = self.prepare_value(value)
        if len(rows) > 1:
            self._meta = self._meta.drop(index=rows.index[1:])
        return True

    def _insert(self, record_id: RecordId, key: str, value: Any) -> None:
        self._last_id += 1
        self._meta = self._append(self._meta, {
            "meta_id": self._last_id,
            "post_id": str(record_id),
            "meta_key": key,
            "meta_value": self.prepare_value(value)
        })

    def add_metadata(self, record_id: RecordId, key: str, value: Any) -> bool:
        self._insert(record_id, key, value)
        return True

    def delete_metadata(self, record_id: RecordId, key: str) -> bool:
        rows = self._rows_for(record_id, key)
        if rows.empty:
            return False
        self._meta = self._meta.drop(index=rows.index)
        return True
