"""
Main API class for Post-Meta.
"""

from typing import Any, Dict, Iterable, List, Optional

from post_meta.core import MetaStore, PostMeta, PostRecord, RecordClass, TransferStats
from post_meta.core.models import RecordId
from post_meta.storage import InMemoryMetaStore, ParquetMetaStore
from post_meta.utils.hash_utils import compute_meta_fingerprint


class PostMetaStore:
    """
    Main API class for Post-Meta.

    This class provides a unified interface for working with Post-Meta.
    It handles initialization of the metadata backend and exposes the
    copy and delete operations on top of it.
    """

    def __init__(
        self,
        metadata_backend: str = "memory",
        storage_path: Optional[str] = None,
        store: Optional[MetaStore] = None,
        **backend_options: Any
    ):
        """
        Initialize the Post-Meta store.

        Args:
            metadata_backend: Metadata backend type ('memory' or 'parquet')
            storage_path: Directory for the tables (required for parquet)
            store: Ready-made MetaStore to use instead of building a backend
            backend_options: Extra keyword arguments for the backend
        """
        if store is not None:
            self.store = store
        elif metadata_backend == "memory":
            self.store = InMemoryMetaStore()
        elif metadata_backend == "parquet":
            if not storage_path:
                raise ValueError("storage_path is required for parquet backend")
            self.store = ParquetMetaStore(storage_path, **backend_options)
        else:
            raise ValueError(f"Unsupported metadata backend: {metadata_backend}")

        self.post_meta = PostMeta(self.store)

    def register_record(
        self,
        record_id: RecordId,
        record_class: RecordClass = RecordClass.POST
    ) -> None:
        """
        Register a record and its class with the backend.

        Args:
            record_id: Record identifier
            record_class: RecordClass.POST or RecordClass.REVISION
        """
        self.store.register_record(PostRecord(record_id, record_class))

    def get_meta(self, record_id: RecordId) -> Dict[str, List[Any]]:
        """
        Get all metadata of a record with values deserialized.

        Args:
            record_id: Record identifier

        Returns:
            Mapping of key to list of values
        """
        return {
            key: [self.store.maybe_unserialize(value) for value in values]
            for key, values in self.store.get_metadata(record_id).items()
        }

    def copy_all(
        self,
        source_id: RecordId,
        destination_id: RecordId,
        exclude: Optional[Iterable[str]] = None
    ) -> TransferStats:
        """Copy all non-excluded metadata to a normal record."""
        return self.post_meta.copy_all(source_id, destination_id, exclude)

    def copy_all_to_draft(
        self,
        source_id: RecordId,
        destination_id: RecordId,
        exclude: Optional[Iterable[str]] = None
    ) -> TransferStats:
        """Copy all non-excluded metadata to a revision-class record."""
        return self.post_meta.copy_all_to_draft(source_id, destination_id, exclude)

    def delete_all(
        self,
        record_id: RecordId,
        exclude: Optional[Iterable[str]] = None
    ) -> TransferStats:
        """Delete all non-excluded metadata of a normal record."""
        return self.post_meta.delete_all(record_id, exclude)

    def delete_all_from_draft(
        self,
        record_id: RecordId,
        exclude: Optional[Iterable[str]] = None
    ) -> TransferStats:
        """Delete all non-excluded metadata of a revision-class record."""
        return self.post_meta.delete_all_from_draft(record_id, exclude)

    def fingerprint(self, record_id: RecordId) -> str:
        """
        Get a fingerprint of all metadata of a record.

        Args:
            record_id: Record identifier

        Returns:
            Hex digest that changes whenever a key or value changes
        """
        return compute_meta_fingerprint(self.store.get_metadata(record_id))

    def same_meta(self, first_id: RecordId, second_id: RecordId) -> bool:
        """Check whether two records hold identical metadata."""
        return self.fingerprint(first_id) == self.fingerprint(second_id)

    def save(self) -> Dict[str, int]:
        """
        Persist the backend if it supports it.

        Returns:
            Statistics from the backend, empty for in-memory stores
        """
        if isinstance(self.store, ParquetMetaStore):
            return self.store.save()
        return {}
