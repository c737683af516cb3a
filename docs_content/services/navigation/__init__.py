"""Sidebar and previous/next navigation views over the content hierarchy."""

from .article_linker import ArticleLink, ArticleLinker, ArticleLinks
from .sidebar_builder import (
    SidebarBuilder,
    SidebarContent,
    SidebarContext,
    SidebarLink,
    UnlistedPolicy,
)

__all__ = [
    "ArticleLink",
    "ArticleLinker",
    "ArticleLinks",
    "SidebarBuilder",
    "SidebarContent",
    "SidebarContext",
    "SidebarLink",
    "UnlistedPolicy",
]
