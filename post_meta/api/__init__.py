"""
Public API for Post-Meta.
"""

from .store import PostMetaStore

__all__ = ["PostMetaStore"]
