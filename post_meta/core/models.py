"""
Data models for Post-Meta.
"""

import enum
from typing import Any, Dict, Union
from dataclasses import dataclass


RecordId = Union[int, str]


class RecordClass(enum.Enum):
    """Class of a record in the host store."""
    POST = "post"
    REVISION = "revision"


class WriteMode(enum.Enum):
    """
    Which host write path a transfer uses.

    NORMAL goes through the post meta primitives, which refuse
    revision-class records. ANY goes through the generic metadata
    primitives, which accept every record class.
    """
    NORMAL = "normal"
    ANY = "any"


@dataclass
class PostRecord:
    """
    A record known to the host store.

    Attributes:
        record_id: Opaque record identifier
        record_class: Whether the record is a normal post or a revision
    """
    record_id: RecordId
    record_class: RecordClass = RecordClass.POST

    @property
    def is_revision(self) -> bool:
        return self.record_class is RecordClass.REVISION


@dataclass
class MetaRow:
    """
    A single stored metadata value.

    Attributes:
        meta_id: Row id, increasing in insertion order
        record_id: Record the value belongs to
        meta_key: Metadata key
        meta_value: Stored (serialized) value
    """
    meta_id: int
    record_id: RecordId
    meta_key: str
    meta_value: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "meta_id": self.meta_id,
            "post_id": self.record_id,
            "meta_key": self.meta_key,
            "meta_value": self.meta_value
        }


@dataclass
class TransferStats:
    """
    Counters for one copy or delete operation.

    Attributes:
        keys_processed: Keys that were written or deleted
        keys_skipped: Keys left alone because they were excluded
        writes: Store calls issued (updates, adds or deletes)
        rejected: Store calls that reported failure
    """
    keys_processed: int = 0
    keys_skipped: int = 0
    writes: int = 0
    rejected: int = 0

    def record_write(self, accepted: bool) -> None:
        self.writes += 1
        if not accepted:
            self.rejected += 1

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return {
            "keys_processed": self.keys_processed,
            "keys_skipped": self.keys_skipped,
            "writes": self.writes,
            "rejected": self.rejected
        }
