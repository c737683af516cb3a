"""Managers: take a DB session and provide access to models."""

from .content_store import ContentStore
from .snapshot_manager import SnapshotManager

__all__ = ["ContentStore", "SnapshotManager"]
