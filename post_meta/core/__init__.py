"""
Core abstractions and interfaces for Post-Meta
"""

from .base import MetaStore
from .models import MetaRow, PostRecord, RecordClass, TransferStats, WriteMode
from .post_meta import LOCK_KEYS, PostMeta

__all__ = [
    "MetaStore",
    "MetaRow",
    "PostRecord",
    "RecordClass",
    "TransferStats",
    "WriteMode",
    "LOCK_KEYS",
    "PostMeta"
]
