"""
Base abstractions for the Post-Meta system.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from post_meta.core.models import PostRecord, RecordClass, RecordId
from post_meta.utils import serialization


logger = logging.getLogger(__name__)


class MetaStore(ABC):
    """
    Abstract base class for host metadata stores.

    A store keeps a multimap of key to values per record. Subclasses
    implement the generic metadata primitives, which accept every record
    class. The post meta primitives defined here wrap them and refuse
    revision-class records, the way the host's default write path does.
    """

    @abstractmethod
    def register_record(self, record: PostRecord) -> None:
        """
        Make a record and its class known to the store.

        Args:
            record: Record to register
        """
        pass

    @abstractmethod
    def get_record_class(self, record_id: RecordId) -> RecordClass:
        """
        Get the class of a record.

        Args:
            record_id: Record identifier

        Returns:
            The registered class, RecordClass.POST for unknown records
        """
        pass

    @abstractmethod
    def get_metadata(self, record_id: RecordId) -> Dict[str, List[Any]]:
        """
        Get all metadata of a record.

        Args:
            record_id: Record identifier

        Returns:
            Mapping of key to raw stored values in insertion order,
            empty for unknown records
        """
        pass

    @abstractmethod
    def get_metadata_keys(self, record_id: RecordId) -> List[str]:
        """
        Get the distinct metadata keys of a record.

        Args:
            record_id: Record identifier

        Returns:
            List of keys in order of first appearance
        """
        pass

    @abstractmethod
    def update_metadata(self, record_id: RecordId, key: str, value: Any) -> bool:
        """
        Set a key to a single value on a record of any class.

        The value arrives slashed. If the key is absent a row is added;
        otherwise the first row is rewritten and the other rows for the
        key are dropped.

        Args:
            record_id: Record identifier
            key: Metadata key
            value: Slashed value

        Returns:
            True if the write was applied, False otherwise
        """
        pass

    @abstractmethod
    def add_metadata(self, record_id: RecordId, key: str, value: Any) -> bool:
        """
        Append a value under a key on a record of any class.

        Args:
            record_id: Record identifier
            key: Metadata key
            value: Slashed value

        Returns:
            True if the write was applied, False otherwise
        """
        pass

    @abstractmethod
    def delete_metadata(self, record_id: RecordId, key: str) -> bool:
        """
        Delete every value under a key on a record of any class.

        Args:
            record_id: Record identifier
            key: Metadata key

        Returns:
            True if anything was deleted, False otherwise
        """
        pass

    def is_revision(self, record_id: RecordId) -> bool:
        """Check whether a record is revision-class."""
        return self.get_record_class(record_id) is RecordClass.REVISION

    def get_post_meta(self, record_id: RecordId) -> Dict[str, List[Any]]:
        """Get all metadata of a record, see get_metadata."""
        return self.get_metadata(record_id)

    def get_post_meta_keys(self, record_id: RecordId) -> List[str]:
        """Get the distinct metadata keys of a record, see get_metadata_keys."""
        return self.get_metadata_keys(record_id)

    def update_post_meta(self, record_id: RecordId, key: str, value: Any) -> bool:
        """
        Set a key to a single value on a normal record.

        Returns:
            False without writing if the record is a revision
        """
        if self.is_revision(record_id):
            logger.debug(f"Refusing to update '{key}' on revision {record_id}")
            return False
        return self.update_metadata(record_id, key, value)

    def add_post_meta(self, record_id: RecordId, key: str, value: Any) -> bool:
        """
        Append a value under a key on a normal record.

        Returns:
            False without writing if the record is a revision
        """
        if self.is_revision(record_id):
            logger.debug(f"Refusing to add '{key}' on revision {record_id}")
            return False
        return self.add_metadata(record_id, key, value)

    def delete_post_meta(self, record_id: RecordId, key: str) -> bool:
        """
        Delete every value under a key on a normal record.

        Returns:
            False without deleting if the record is a revision
        """
        if self.is_revision(record_id):
            logger.debug(f"Refusing to delete '{key}' on revision {record_id}")
            return False
        return self.delete_metadata(record_id, key)

    def maybe_unserialize(self, raw: Any) -> Any:
        """Decode a raw stored value if it is serialized."""
        return serialization.maybe_unserialize(raw)

    def slash(self, value: Any) -> Any:
        """Escape a value for the write primitives."""
        return serialization.slash(value)

    def prepare_value(self, value: Any) -> str:
        """
        Turn a slashed value into its stored text form.

        Args:
            value: Value as handed to a write primitive

        Returns:
            Text to keep in the store
        """
        value = serialization.unslash(value)
        return serialization.to_db_value(serialization.maybe_serialize(value))
