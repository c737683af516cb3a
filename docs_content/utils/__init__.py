"""Utility helpers for content paths and article bodies."""

from .content_paths import is_normalized_path, join_segments, normalize_path, split_path
from .headings import ArticleHeading, extract_headings, heading_slug

__all__ = [
    "ArticleHeading",
    "extract_headings",
    "heading_slug",
    "is_normalized_path",
    "join_segments",
    "normalize_path",
    "split_path",
]
