"""docs_content: documentation hierarchy, path resolution and navigation."""

from .db_managers import ContentStore
from .errors import ContentError, ContentNotFoundError, IntegrityViolation, SnapshotFormatError
from .services import (
    ArticleLinker,
    ContentService,
    PathEnumerator,
    PathResolver,
    SidebarBuilder,
    load_snapshot_file,
)

__all__ = [
    "ArticleLinker",
    "ContentError",
    "ContentNotFoundError",
    "ContentService",
    "ContentStore",
    "IntegrityViolation",
    "PathEnumerator",
    "PathResolver",
    "SidebarBuilder",
    "SnapshotFormatError",
    "load_snapshot_file",
]
