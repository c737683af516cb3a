"""SQLAlchemy models."""

from .article import Article, ArticleStatus
from .author import Author
from .base import Base
from .category import Category
from .content_kind import ContentKind
from .group import Group
from .section import Section, SidebarBehavior

__all__ = [
    "Article",
    "ArticleStatus",
    "Author",
    "Base",
    "Category",
    "ContentKind",
    "Group",
    "Section",
    "SidebarBehavior",
]
