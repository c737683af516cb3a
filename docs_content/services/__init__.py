"""Service layer exports."""

from .content import ContentService, EnumerationPolicy, PathEnumerator, PathResolver
from .navigation import ArticleLinker, SidebarBuilder, SidebarContext, UnlistedPolicy
from .snapshot import load_snapshot_file, publish_snapshot, validate_snapshot

__all__ = [
    "ArticleLinker",
    "ContentService",
    "EnumerationPolicy",
    "PathEnumerator",
    "PathResolver",
    "SidebarBuilder",
    "SidebarContext",
    "UnlistedPolicy",
    "load_snapshot_file",
    "publish_snapshot",
    "validate_snapshot",
]
