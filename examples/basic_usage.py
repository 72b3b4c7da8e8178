#!/usr/bin/env python3
"""
Post-Meta Basic Usage Example

This example demonstrates how to:
1. Copy all metadata from a post to another post
2. Copy metadata into a revision
3. Delete all metadata while keeping the edit lock keys
"""

import os
import sys
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from post_meta.api import PostMetaStore
from post_meta.core import LOCK_KEYS, RecordClass
from post_meta.utils import slash

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def seed_post(meta_store, post_id):
    """
    Give a post some sample metadata.
    
    Args:
        meta_store: PostMetaStore instance
        post_id: Post to write to
    """
    store = meta_store.store
    store.add_metadata(post_id, "color", "red")
    store.add_metadata(post_id, "tags", "news")
    store.add_metadata(post_id, "tags", "featured")
    store.add_metadata(post_id, "layout", slash({"columns": 2, "sidebar": "left"}))
    store.add_metadata(post_id, "edit-lock", "1700000000:3")
    store.add_metadata(post_id, "edit-last-editor", "3")


def main():
    meta_store = PostMetaStore()

    original_id, copy_id, revision_id = 100, 200, 201
    seed_post(meta_store, original_id)
    meta_store.register_record(revision_id, RecordClass.REVISION)

    # Copy everything except the edit lock keys
    stats = meta_store.copy_all(original_id, copy_id, exclude=LOCK_KEYS)
    logger.info(f"Copy stats: {stats.to_dict()}")
    logger.info(f"Copied metadata: {meta_store.get_meta(copy_id)}")
    logger.info(f"Identical to original: {meta_store.same_meta(original_id, copy_id)}")

    # The normal path refuses revisions; the draft path does not
    stats = meta_store.copy_all(original_id, revision_id, exclude=LOCK_KEYS)
    logger.info(f"Copy to revision via normal path: {stats.rejected} writes rejected")
    stats = meta_store.copy_all_to_draft(original_id, revision_id, exclude=LOCK_KEYS)
    logger.info(f"Copy to revision via draft path: {stats.writes} writes")

    # Multi-valued keys grow on every copy
    meta_store.copy_all(original_id, copy_id, exclude=LOCK_KEYS)
    logger.info(f"Tags after a second copy: {meta_store.get_meta(copy_id)['tags']}")

    # Clear the original, keeping the lock
    stats = meta_store.delete_all(original_id, exclude=LOCK_KEYS)
    logger.info(f"Deleted {stats.keys_processed} keys, left: {meta_store.get_meta(original_id)}")

    meta_store.delete_all_from_draft(revision_id)
    logger.info(f"Revision metadata after delete: {meta_store.get_meta(revision_id)}")


if __name__ == "__main__":
    main()
