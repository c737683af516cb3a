"""Snapshot parsing, validation and publication (build time only)."""

from .loader import load_snapshot_document, load_snapshot_file, publish_snapshot, read_snapshot_file
from .parser import Snapshot, parse_snapshot
from .validator import collect_problems, validate_snapshot

__all__ = [
    "Snapshot",
    "collect_problems",
    "load_snapshot_document",
    "load_snapshot_file",
    "parse_snapshot",
    "publish_snapshot",
    "read_snapshot_file",
    "validate_snapshot",
]
