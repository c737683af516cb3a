"""Previous/next article links within a section."""

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterator

from docs_content.db_managers import ContentStore
from docs_content.models import Article, ContentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArticleLink:
    """Projection of an article for navigation; never carries the body."""

    id: str
    title: str
    description: str | None
    category_id: str
    section_id: str
    path: str

    @classmethod
    def from_article(cls, article: Article) -> "ArticleLink":
        return cls(
            id=article.id,
            title=article.title,
            description=article.description,
            category_id=article.category_id,
            section_id=article.section_id,
            path=article.path,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "categoryId": self.category_id,
            "sectionId": self.section_id,
            "path": self.path,
        }


@dataclass(frozen=True)
class ArticleLinks:
    prev: ArticleLink | None
    next: ArticleLink | None

    def to_dict(self) -> dict[str, object]:
        return {
            "prev": self.prev.to_dict() if self.prev else None,
            "next": self.next.to_dict() if self.next else None,
        }


class ArticleLinker:
    """Computes adjacent published articles.

    The chain is the section's published articles by section_index, so it
    crosses category boundaries but never section boundaries. Drafts and
    unlisted articles are skipped.
    """

    def __init__(self, store: ContentStore):
        self._store = store

    def get_adjacent(self, article: Article) -> ArticleLinks:
        chain = [a for a in self._store.list_section_articles(article.section_id) if a.is_published]

        prev_article: Article | None = None
        next_article: Article | None = None
        for candidate in chain:
            if candidate.id == article.id:
                continue
            if candidate.section_index < article.section_index:
                prev_article = candidate
            elif candidate.section_index > article.section_index:
                next_article = candidate
                break

        logger.debug(
            "Adjacent articles for %s: prev=%s next=%s",
            article.id,
            prev_article.id if prev_article else None,
            next_article.id if next_article else None,
        )
        return ArticleLinks(
            prev=ArticleLink.from_article(prev_article) if prev_article else None,
            next=ArticleLink.from_article(next_article) if next_article else None,
        )

    def iter_article_order(self) -> Iterator[Article]:
        """Every published article, by (section index, section_index)."""
        by_section: dict[str, list[Article]] = defaultdict(list)
        for article in self._store.get_all(ContentKind.ARTICLE):
            if article.is_published:
                by_section[article.section_id].append(article)
        for section in self._store.list_sections():
            yield from sorted(by_section.get(section.id, []), key=lambda a: a.section_index)
