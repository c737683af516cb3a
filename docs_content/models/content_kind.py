"""Kinds of content that own a rendered page (plus the group label)."""

from enum import Enum


class ContentKind(str, Enum):
    SECTION = "section"
    CATEGORY = "category"
    GROUP = "group"
    ARTICLE = "article"
