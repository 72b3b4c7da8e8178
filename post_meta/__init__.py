"""
Post-Meta: copy and delete post metadata in a host metadata store.
"""

from post_meta.core import LOCK_KEYS, MetaStore, PostMeta, PostRecord, RecordClass

__version__ = "0.1.0"

__all__ = [
    "LOCK_KEYS",
    "MetaStore",
    "PostMeta",
    "PostRecord",
    "RecordClass"
]
