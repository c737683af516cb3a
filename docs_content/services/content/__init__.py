"""Path resolution, route enumeration and the content service."""

from .path_enumerator import EnumerationPolicy, PathEnumerator
from .path_resolver import (
    PathResolver,
    ResolvedArticle,
    ResolvedCategory,
    ResolvedContent,
    ResolvedSection,
)
from .service import ContentService, sidebar_context_for

__all__ = [
    "ContentService",
    "EnumerationPolicy",
    "PathEnumerator",
    "PathResolver",
    "ResolvedArticle",
    "ResolvedCategory",
    "ResolvedContent",
    "ResolvedSection",
    "sidebar_context_for",
]
