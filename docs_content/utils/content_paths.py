"""Helpers for "/section/category/article" content paths."""

from typing import Iterable

from constants import PATH_SEPARATOR


def split_path(path: str) -> list[str]:
    """Return the non-empty segments of a path."""
    return [segment for segment in path.split(PATH_SEPARATOR) if segment]


def join_segments(segments: Iterable[str]) -> str:
    """Join route segments into a normalized path ("/a/b")."""
    return PATH_SEPARATOR + PATH_SEPARATOR.join(s for s in segments if s)


def normalize_path(path: str) -> str:
    """Strip surrounding whitespace, empty segments and the trailing slash."""
    return join_segments(split_path(path.strip()))


def is_normalized_path(path: str) -> bool:
    return bool(path) and path != PATH_SEPARATOR and normalize_path(path) == path
