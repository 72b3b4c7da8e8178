"""
Utility functions for Post-Meta.
"""

from .hash_utils import compute_meta_fingerprint, compute_value_hash
from .serialization import maybe_serialize, maybe_unserialize, slash, unslash

__all__ = [
    "compute_meta_fingerprint",
    "compute_value_hash",
    "maybe_serialize",
    "maybe_unserialize",
    "slash",
    "unslash"
]
