"""Build the nested sidebar (section > category > [group >] article) from the store."""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum

from config import SIDEBAR_UNLISTED_POLICY
from docs_content.db_managers import ContentStore
from docs_content.models import Article, Category, ContentKind, Group, Section

logger = logging.getLogger(__name__)


class UnlistedPolicy(str, Enum):
    """How unlisted articles are treated in the sidebar."""

    HIDE = "hide"
    SHOW = "show"
    ACTIVE_ONLY = "active-only"

    @classmethod
    def from_config(cls) -> "UnlistedPolicy":
        return cls(SIDEBAR_UNLISTED_POLICY)


@dataclass(frozen=True)
class SidebarContext:
    """The page currently being viewed; all None for a landing view."""

    section_id: str | None = None
    category_id: str | None = None
    article_id: str | None = None


@dataclass
class SidebarLink:
    """One sidebar node. url is None for headings that are not links
    (show-title sections and group markers)."""

    title: str
    url: str | None
    type: ContentKind
    children: list["SidebarLink"] = field(default_factory=list)
    article_id: str | None = None

    def to_dict(self) -> dict[str, object]:
        result: dict[str, object] = {
            "title": self.title,
            "url": self.url,
            "type": self.type.value,
        }
        if self.type is ContentKind.ARTICLE:
            result["articleId"] = self.article_id
        else:
            result["children"] = [child.to_dict() for child in self.children]
        return result


@dataclass
class SidebarContent:
    section_id: str | None
    category_id: str | None
    article_id: str | None
    links: list[SidebarLink]

    def to_dict(self) -> dict[str, object]:
        return {
            "sectionId": self.section_id,
            "categoryId": self.category_id,
            "articleId": self.article_id,
            "links": [link.to_dict() for link in self.links],
        }


class SidebarBuilder:
    """Projects the content tables into an ordered sidebar tree.

    Every level is sorted by its own index field. Drafts never appear;
    unlisted articles follow the configured UnlistedPolicy.
    """

    def __init__(self, store: ContentStore, unlisted_policy: UnlistedPolicy = UnlistedPolicy.ACTIVE_ONLY):
        self._store = store
        self._unlisted_policy = UnlistedPolicy(unlisted_policy)

    @property
    def unlisted_policy(self) -> UnlistedPolicy:
        return self._unlisted_policy

    def build_sidebar(self, context: SidebarContext | None = None) -> SidebarContent:
        context = context or SidebarContext()

        categories_by_section: dict[str, list[Category]] = defaultdict(list)
        for category in self._store.get_all(ContentKind.CATEGORY):
            categories_by_section[category.section_id].append(category)

        groups_by_category: dict[str, list[Group]] = defaultdict(list)
        for group in self._store.get_all(ContentKind.GROUP):
            groups_by_category[group.category_id].append(group)

        articles_by_category: dict[str, list[Article]] = defaultdict(list)
        for article in self._store.get_all(ContentKind.ARTICLE):
            if self._is_visible(article, context):
                articles_by_category[article.category_id].append(article)

        links = [
            self._section_link(section, categories_by_section, groups_by_category, articles_by_category)
            for section in self._store.get_all(ContentKind.SECTION)
        ]
        logger.debug(
            "Built sidebar sections=%d section_id=%s category_id=%s article_id=%s",
            len(links), context.section_id, context.category_id, context.article_id,
        )
        return SidebarContent(
            section_id=context.section_id,
            category_id=context.category_id,
            article_id=context.article_id,
            links=links,
        )

    def _is_visible(self, article: Article, context: SidebarContext) -> bool:
        if article.is_draft:
            return False
        if not article.is_unlisted:
            return True
        if self._unlisted_policy is UnlistedPolicy.SHOW:
            return True
        if self._unlisted_policy is UnlistedPolicy.ACTIVE_ONLY:
            return context.article_id is not None and article.id == context.article_id
        return False

    def _section_link(
        self,
        section: Section,
        categories_by_section: dict[str, list[Category]],
        groups_by_category: dict[str, list[Group]],
        articles_by_category: dict[str, list[Article]],
    ) -> SidebarLink:
        categories = sorted(categories_by_section.get(section.id, []), key=lambda c: c.index)
        return SidebarLink(
            title=section.title,
            url=section.path if section.shows_links else None,
            type=ContentKind.SECTION,
            children=[
                self._category_link(
                    category,
                    groups_by_category.get(category.id, []),
                    articles_by_category.get(category.id, []),
                )
                for category in categories
            ],
        )

    def _category_link(
        self,
        category: Category,
        groups: list[Group],
        articles: list[Article],
    ) -> SidebarLink:
        groups = sorted(groups, key=lambda g: g.index)
        group_ids = {g.id for g in groups}

        ungrouped = sorted(
            (a for a in articles if a.group_id not in group_ids),
            key=lambda a: a.category_index,
        )
        children = [self._article_link(a) for a in ungrouped]

        for group in groups:
            members = sorted(
                (a for a in articles if a.group_id == group.id),
                key=lambda a: (a.group_index if a.group_index is not None else a.category_index),
            )
            if not members:
                continue
            children.append(
                SidebarLink(
                    title=group.label,
                    url=None,
                    type=ContentKind.GROUP,
                    children=[self._article_link(a) for a in members],
                )
            )

        return SidebarLink(
            title=category.title,
            url=category.path,
            type=ContentKind.CATEGORY,
            children=children,
        )

    @staticmethod
    def _article_link(article: Article) -> SidebarLink:
        return SidebarLink(
            title=article.title,
            url=article.path,
            type=ContentKind.ARTICLE,
            article_id=article.id,
        )
