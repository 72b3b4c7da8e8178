"""
Storage implementations for Post-Meta.
"""

from .memory_store import InMemoryMetaStore
from .parquet_store import ParquetMetaStore

__all__ = [
    "InMemoryMetaStore",
    "ParquetMetaStore"
]
