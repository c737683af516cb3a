"""Service for content lookups: resolution, navigation, route listing."""

import logging

from docs_content.db import DBAdapter
from docs_content.db_managers import ContentStore
from docs_content.errors import ContentNotFoundError
from docs_content.models import Article, Author, Category, ContentKind, Section
from docs_content.services.content.path_enumerator import EnumerationPolicy, PathEnumerator
from docs_content.services.content.path_resolver import (
    PathResolver,
    ResolvedCategory,
    ResolvedContent,
    ResolvedSection,
)
from docs_content.services.navigation.article_linker import ArticleLinker
from docs_content.services.navigation.sidebar_builder import (
    SidebarBuilder,
    SidebarContext,
    UnlistedPolicy,
)
from docs_content.utils.content_paths import normalize_path
from docs_content.utils.headings import extract_headings

logger = logging.getLogger(__name__)


def _section_dict(section: Section) -> dict[str, object]:
    return {
        "id": section.id,
        "title": section.title,
        "description": section.description,
        "path": section.path,
        "index": section.index,
        "sidebar_behavior": section.sidebar_behavior,
        "categories": section.get_category_ids(),
    }


def _category_dict(category: Category) -> dict[str, object]:
    return {
        "id": category.id,
        "title": category.title,
        "description": category.description,
        "path": category.path,
        "sectionId": category.section_id,
        "index": category.index,
        "groups": category.get_group_ids(),
    }


def _author_dict(author: Author) -> dict[str, object]:
    return {
        "id": author.id,
        "name": author.name,
        "image": author.image,
        "email": author.email,
        "twitter": author.twitter,
    }


def _article_dict(article: Article) -> dict[str, object]:
    return {
        "id": article.id,
        "title": article.title,
        "description": article.description,
        "content": article.content,
        "path": article.path,
        "groupId": article.group_id,
        "groupIndex": article.group_index,
        "categoryId": article.category_id,
        "categoryIndex": article.category_index,
        "sectionId": article.section_id,
        "sectionIndex": article.section_index,
        "author": article.author_id,
        "hero": article.hero,
        "status": article.status,
        "date": article.date,
        "keywords": article.get_keywords(),
        "sourceUrl": article.source_url,
    }


def _page_link(entity: Section | Category | Article) -> dict[str, object]:
    return {"id": entity.id, "title": entity.title, "description": entity.description, "path": entity.path}


def sidebar_context_for(resolved: ResolvedContent) -> SidebarContext:
    """Navigation context for the page a path resolved to."""
    if isinstance(resolved, ResolvedSection):
        return SidebarContext(section_id=resolved.section.id)
    if isinstance(resolved, ResolvedCategory):
        category = resolved.category
        return SidebarContext(section_id=category.section_id, category_id=category.id)
    article = resolved.article
    return SidebarContext(
        section_id=article.section_id,
        category_id=article.category_id,
        article_id=article.id,
    )


class ContentService:
    """Content page operations over an explicitly provided DB adapter.

    Each call opens its own session, so one service instance can be shared
    by concurrent requests.
    """

    def __init__(
        self,
        adapter: DBAdapter,
        *,
        unlisted_policy: UnlistedPolicy | None = None,
        enumeration_policy: EnumerationPolicy | None = None,
    ):
        self._adapter = adapter
        self._unlisted_policy = unlisted_policy or UnlistedPolicy.from_config()
        self._enumeration_policy = enumeration_policy or EnumerationPolicy.from_config()

    def get_content(self, path: str) -> dict[str, object]:
        """Resolve a path and return the page payload for its section, category or article."""
        path = normalize_path(path)
        with self._adapter.session() as session:
            store = ContentStore(session)
            resolved = PathResolver(store).resolve(path)
            logger.debug("Resolved path=%s kind=%s id=%s", path, resolved.kind.value, resolved.entity.id)

            if isinstance(resolved, ResolvedSection):
                section = resolved.section
                return {
                    "type": ContentKind.SECTION.value,
                    "section": _section_dict(section),
                    "children": [_page_link(c) for c in store.list_categories(section.id)],
                }

            if isinstance(resolved, ResolvedCategory):
                category = resolved.category
                articles = [a for a in store.list_category_articles(category.id) if a.is_published]
                return {
                    "type": ContentKind.CATEGORY.value,
                    "category": _category_dict(category),
                    "children": [_page_link(a) for a in articles],
                }

            article = resolved.article
            author = store.get_author(article.author_id) if article.author_id else None
            return {
                "type": ContentKind.ARTICLE.value,
                "article": _article_dict(article),
                "author": _author_dict(author) if author else None,
                "links": ArticleLinker(store).get_adjacent(article).to_dict(),
            }

    def get_sidebar(
        self,
        *,
        section_id: str | None = None,
        category_id: str | None = None,
        article_id: str | None = None,
    ) -> dict[str, object]:
        context = SidebarContext(section_id=section_id, category_id=category_id, article_id=article_id)
        with self._adapter.session() as session:
            builder = SidebarBuilder(ContentStore(session), self._unlisted_policy)
            return builder.build_sidebar(context).to_dict()

    def get_sidebar_for_path(self, path: str) -> dict[str, object]:
        """Sidebar with the context taken from whatever the path resolves to."""
        path = normalize_path(path)
        with self._adapter.session() as session:
            store = ContentStore(session)
            context = sidebar_context_for(PathResolver(store).resolve(path))
            return SidebarBuilder(store, self._unlisted_policy).build_sidebar(context).to_dict()

    def get_article_links(self, article_id: str) -> dict[str, object]:
        with self._adapter.session() as session:
            store = ContentStore(session)
            article = self._get_article(store, article_id)
            return ArticleLinker(store).get_adjacent(article).to_dict()

    def get_article_headings(self, article_id: str) -> list[dict[str, object]]:
        with self._adapter.session() as session:
            article = self._get_article(ContentStore(session), article_id)
            return [h.to_dict() for h in extract_headings(article.content)]

    def list_paths(self) -> list[str]:
        with self._adapter.session() as session:
            return PathEnumerator(ContentStore(session), self._enumeration_policy).enumerate_all_paths()

    def list_route_params(self) -> list[list[str]]:
        with self._adapter.session() as session:
            return PathEnumerator(ContentStore(session), self._enumeration_policy).enumerate_route_params()

    @staticmethod
    def _get_article(store: ContentStore, article_id: str) -> Article:
        article = store.get_by_id(ContentKind.ARTICLE, article_id)
        if article is None:
            raise ContentNotFoundError(f"Article not found: {article_id}")
        return article
