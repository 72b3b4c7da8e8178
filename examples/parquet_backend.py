#!/usr/bin/env python3
"""
Post-Meta Parquet Backend Example

This example demonstrates how to keep post metadata in Parquet files
and copy it between posts across runs.
"""

import os
import sys
import logging
import tempfile

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from post_meta.api import PostMetaStore
from post_meta.core import LOCK_KEYS

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    storage_path = os.path.join(tempfile.gettempdir(), "post_meta_example")

    meta_store = PostMetaStore(metadata_backend="parquet", storage_path=storage_path)
    if not meta_store.get_meta(1):
        meta_store.store.add_metadata(1, "subtitle", "From the archive")
        meta_store.store.add_metadata(1, "related", "12")
        meta_store.store.add_metadata(1, "related", "15")
        meta_store.store.add_metadata(1, "edit-lock", "1700000000:3")

    meta_store.copy_all(1, 2, exclude=LOCK_KEYS)
    logger.info(f"Saved: {meta_store.save()}")

    # A second instance reads what the first one saved
    reopened = PostMetaStore(metadata_backend="parquet", storage_path=storage_path)
    logger.info(f"Post 2 metadata: {reopened.get_meta(2)}")
    logger.info(f"Fingerprint of post 2: {reopened.fingerprint(2)}")
    logger.info("\nPostmeta table:\n" + reopened.store.to_dataframe().to_string(index=False))


if __name__ == "__main__":
    main()
