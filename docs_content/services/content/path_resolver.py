"""Resolve a content path to the section, category or article that owns it."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Literal, Union

from docs_content.db_managers import ContentStore
from docs_content.errors import ContentNotFoundError
from docs_content.models import Article, Category, ContentKind, Section
from docs_content.utils.content_paths import join_segments

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedSection:
    section: Section
    kind: Literal[ContentKind.SECTION] = field(default=ContentKind.SECTION, init=False)

    @property
    def entity(self) -> Section:
        return self.section


@dataclass(frozen=True)
class ResolvedCategory:
    category: Category
    kind: Literal[ContentKind.CATEGORY] = field(default=ContentKind.CATEGORY, init=False)

    @property
    def entity(self) -> Category:
        return self.category


@dataclass(frozen=True)
class ResolvedArticle:
    article: Article
    kind: Literal[ContentKind.ARTICLE] = field(default=ContentKind.ARTICLE, init=False)

    @property
    def entity(self) -> Article:
        return self.article


ResolvedContent = Union[ResolvedSection, ResolvedCategory, ResolvedArticle]


class PathResolver:
    """Maps a normalized path to exactly one page-owning entity.

    Tables are tried in order: sections, categories, articles. Groups have no
    page and are never looked up.
    """

    def __init__(self, store: ContentStore):
        self._store = store

    def resolve(self, path: str) -> ResolvedContent:
        section = self._store.get_by_path(ContentKind.SECTION, path)
        if section is not None:
            return ResolvedSection(section)

        category = self._store.get_by_path(ContentKind.CATEGORY, path)
        if category is not None:
            return ResolvedCategory(category)

        article = self._store.get_by_path(ContentKind.ARTICLE, path)
        if article is not None:
            return ResolvedArticle(article)

        logger.debug("No content found for path=%s", path)
        raise ContentNotFoundError(f"No content found for {path}", path=path)

    def resolve_segments(self, segments: Iterable[str]) -> ResolvedContent:
        """Resolve route segments, e.g. ["docs", "shapes"] -> "/docs/shapes"."""
        return self.resolve(join_segments(segments))
