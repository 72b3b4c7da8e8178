"""
Copy and delete all metadata of a post in one call.
"""

import logging
from typing import Any, Callable, Iterable, NamedTuple, Optional

from post_meta.core.base import MetaStore
from post_meta.core.models import RecordId, TransferStats, WriteMode


logger = logging.getLogger(__name__)


# Keys the host uses to mark concurrent-edit locks. Callers usually want
# to exclude these when copying or deleting everything.
LOCK_KEYS = ("edit-lock", "edit-last-editor")


class _WritePath(NamedTuple):
    update: Callable[[RecordId, str, Any], bool]
    add: Callable[[RecordId, str, Any], bool]
    delete: Callable[[RecordId, str], bool]


class PostMeta:
    """
    Copies or deletes all metadata of a record, except excluded keys.

    Each key, and each value of a multi-valued key, is an independent
    store call. Nothing is validated or rolled back; store errors
    propagate and leave the keys handled so far in place.
    """

    LOCK_KEYS = LOCK_KEYS

    def __init__(self, store: MetaStore):
        """
        Initialize the service.

        Args:
            store: Host metadata store to read from and write to
        """
        self.store = store

    def _write_path(self, mode: WriteMode) -> _WritePath:
        if mode is WriteMode.ANY:
            return _WritePath(
                self.store.update_metadata,
                self.store.add_metadata,
                self.store.delete_metadata
            )
        return _WritePath(
            self.store.update_post_meta,
            self.store.add_post_meta,
            self.store.delete_post_meta
        )

    def copy_all(
        self,
        source_id: RecordId,
        destination_id: RecordId,
        exclude: Optional[Iterable[str]] = None
    ) -> TransferStats:
        """
        Copy all non-excluded metadata from one record to another.

        A key with exactly one value overwrites the destination's values
        for that key. A key with several values is appended value by
        value, so the destination keeps what it had and gains every
        source value. Copying the same multi-valued key twice therefore
        adds its values twice.

        Args:
            source_id: Record to copy metadata from
            destination_id: Normal record to copy metadata to
            exclude: Keys to leave out

        Returns:
            Counters for the operation
        """
        return self._transfer_all(source_id, destination_id, exclude, WriteMode.NORMAL)

    def copy_all_to_draft(
        self,
        source_id: RecordId,
        destination_id: RecordId,
        exclude: Optional[Iterable[str]] = None
    ) -> TransferStats:
        """
        Copy all non-excluded metadata to a revision-class record.

        Same as copy_all, through the write path that accepts revisions.
        The destination is not checked.
        """
        return self._transfer_all(source_id, destination_id, exclude, WriteMode.ANY)

    def delete_all(
        self,
        record_id: RecordId,
        exclude: Optional[Iterable[str]] = None
    ) -> TransferStats:
        """
        Delete all metadata of a record except keys in exclude.

        Args:
            record_id: Normal record to delete metadata from
            exclude: Keys to keep

        Returns:
            Counters for the operation
        """
        return self._purge_all(record_id, exclude, WriteMode.NORMAL)

    def delete_all_from_draft(
        self,
        record_id: RecordId,
        exclude: Optional[Iterable[str]] = None
    ) -> TransferStats:
        """
        Delete all metadata of a revision-class record except keys in exclude.

        The record is not checked.
        """
        return self._purge_all(record_id, exclude, WriteMode.ANY)

    def _prepare(self, raw: Any) -> Any:
        value = self.store.maybe_unserialize(raw)
        if isinstance(value, (str, list, tuple, dict)):
            value = self.store.slash(value)
        return value

    def _transfer_all(
        self,
        source_id: RecordId,
        destination_id: RecordId,
        exclude: Optional[Iterable[str]],
        mode: WriteMode
    ) -> TransferStats:
        excluded = frozenset(exclude or ())
        path = self._write_path(mode)
        stats = TransferStats()

        meta = self.store.get_post_meta(source_id)
        for key, values in meta.items():
            if key in excluded:
                stats.keys_skipped += 1
                continue

            if len(values) == 1:
                stats.record_write(
                    path.update(destination_id, key, self._prepare(values[0]))
                )
            else:
                for value in values:
                    stats.record_write(
                        path.add(destination_id, key, self._prepare(value))
                    )
            stats.keys_processed += 1
            logger.debug(f"Copied '{key}' ({len(values)} values) from {source_id} to {destination_id}")

        if stats.rejected:
            logger.warning(
                f"{stats.rejected} of {stats.writes} writes to {destination_id} were rejected"
            )
        logger.info(
            f"Copied {stats.keys_processed} keys from {source_id} to {destination_id} "
            f"({mode.value} write path, {stats.keys_skipped} excluded)"
        )
        return stats

    def _purge_all(
        self,
        record_id: RecordId,
        exclude: Optional[Iterable[str]],
        mode: WriteMode
    ) -> TransferStats:
        excluded = frozenset(exclude or ())
        path = self._write_path(mode)
        stats = TransferStats()

        for key in self.store.get_post_meta_keys(record_id):
            if key in excluded:
                stats.keys_skipped += 1
                continue
            stats.record_write(path.delete(record_id, key))
            stats.keys_processed += 1
            logger.debug(f"Deleted '{key}' from {record_id}")

        if stats.rejected:
            logger.warning(
                f"{stats.rejected} of {stats.writes} deletes on {record_id} were rejected"
            )
        logger.info(
            f"Deleted {stats.keys_processed} keys from {record_id} "
            f"({mode.value} write path, {stats.keys_skipped} excluded)"
        )
        return stats
