"""
Hash utility functions.
"""

import json
import mmh3
from typing import Any, Dict, List


def compute_value_hash(value: Any, seed: int = 42) -> str:
    """
    Compute a hash for a single metadata value.
    
    Args:
        value: Metadata value (raw or deserialized)
        seed: Seed for MurmurHash
        
    Returns:
        String hash value
    """
    if value is None or value == "":
        return "empty"
    
    text = value if isinstance(value, str) else json.dumps(value, sort_keys=True)
    hash_value = mmh3.hash(text, seed=seed)
    return f"{hash_value & 0xFFFFFFFF:08x}"


def compute_meta_fingerprint(meta: Dict[str, List[Any]], seed: int = 42) -> str:
    """
    Compute a fingerprint for all metadata of a record.
    
    Keys are sorted; the order of values under a key is significant,
    so two records share a fingerprint only if every key holds the same
    values in the same order.
    
    Args:
        meta: Mapping of key to list of values, as returned by get_metadata
        seed: Seed for MurmurHash
        
    Returns:
        32-character hex string
    """
    canonical = json.dumps(
        [[key, list(meta[key])] for key in sorted(meta)],
        separators=(",", ":"),
        default=str
    )
    return mmh3.hash_bytes(canonical.encode("utf-8"), seed=seed).hex()
