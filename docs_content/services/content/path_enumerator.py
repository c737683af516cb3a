"""Enumerate every routable content path for route pre-registration."""

import logging
from dataclasses import dataclass

from config import ENUMERATE_DRAFT_ARTICLES, ENUMERATE_UNLISTED_ARTICLES
from docs_content.db_managers import ContentStore
from docs_content.models import Article, ContentKind
from docs_content.utils.content_paths import split_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnumerationPolicy:
    """Which articles get a pre-registered route besides published ones."""

    include_unlisted: bool = True
    include_drafts: bool = True

    @classmethod
    def from_config(cls) -> "EnumerationPolicy":
        return cls(
            include_unlisted=ENUMERATE_UNLISTED_ARTICLES,
            include_drafts=ENUMERATE_DRAFT_ARTICLES,
        )

    def allows(self, article: Article) -> bool:
        if article.is_draft:
            return self.include_drafts
        if article.is_unlisted:
            return self.include_unlisted
        return True


class PathEnumerator:
    """Lists section, category and article paths; groups are never routable."""

    def __init__(self, store: ContentStore, policy: EnumerationPolicy | None = None):
        self._store = store
        self._policy = policy or EnumerationPolicy()

    def enumerate_all_paths(self) -> list[str]:
        paths: list[str] = [s.path for s in self._store.get_all(ContentKind.SECTION)]
        paths.extend(c.path for c in self._store.get_all(ContentKind.CATEGORY))
        paths.extend(
            a.path for a in self._store.get_all(ContentKind.ARTICLE) if self._policy.allows(a)
        )
        logger.debug("Enumerated %d content paths", len(paths))
        return paths

    def enumerate_route_params(self) -> list[list[str]]:
        """Each path as its non-empty segments, e.g. "/docs/shapes" -> ["docs", "shapes"]."""
        return [split_path(path) for path in self.enumerate_all_paths()]
