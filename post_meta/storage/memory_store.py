"""
In-memory metadata store.
"""

import itertools
from typing import Any, Dict, List

from post_meta.core import MetaStore
from post_meta.core.models import MetaRow, PostRecord, RecordClass, RecordId


class InMemoryMetaStore(MetaStore):
    """
    Metadata store that keeps rows in a list.

    Rows are kept in insertion order, which is also meta_id order.
    Useful for tests and for scripting against a snapshot.
    """

    def __init__(self):
        self._rows: List[MetaRow] = []
        self._records: Dict[RecordId, PostRecord] = {}
        self._next_id = itertools.count(1)

    def register_record(self, record: PostRecord) -> None:
        self._records[record.record_id] = record

    def get_record_class(self, record_id: RecordId) -> RecordClass:
        record = self._records.get(record_id)
        return record.record_class if record else RecordClass.POST

    def _rows_for(self, record_id: RecordId, key: str = None) -> List[MetaRow]:
        return [
            row for row in self._rows
            if row.record_id == record_id and (key is None or row.meta_key == key)
        ]

    def get_metadata(self, record_id: RecordId) -> Dict[str, List[Any]]:
        meta: Dict[str, List[Any]] = {}
        for row in self._rows_for(record_id):
            meta.setdefault(row.meta_key, []).append(row.meta_value)
        return meta

    def get_metadata_keys(self, record_id: RecordId) -> List[str]:
        return list(self.get_metadata(record_id))

    def update_metadata(self, record_id: RecordId, key: str, value: Any) -> bool:
        rows = self._rows_for(record_id, key)
        if not rows:
            self._insert(record_id, key, value)
            return True

        rows[0].meta_value = self.prepare_value(value)
        extra = {id(row) for row in rows[1:]}
        self._rows = [row for row in self._rows if id(row) not in extra]
        return True

    def _insert(self, record_id: RecordId, key: str, value: Any) -> None:
        self._rows.append(MetaRow(
            meta_id=next(self._next_id),
            record_id=record_id,
            meta_key=key,
            meta_value=self.prepare_value(value)
        ))

    def add_metadata(self, record_id: RecordId, key: str, value: Any) -> bool:
        self._insert(record_id, key, value)
        return True

    def delete_metadata(self, record_id: RecordId, key: str) -> bool:
        before = len(self._rows)
        self._rows = [
            row for row in self._rows
            if not (row.record_id == record_id and row.meta_key == key)
        ]
        return len(self._rows) < before

    def rows(self) -> List[MetaRow]:
        """Get a copy of all stored rows."""
        return list(self._rows)
