"""Shared pytest fixtures for content hierarchy tests."""

import copy
import uuid
from contextlib import contextmanager
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from docs_content.db_managers import ContentStore
from docs_content.models.base import Base
from docs_content.models.article import Article, ArticleStatus
from docs_content.models.author import Author
from docs_content.models.category import Category
from docs_content.models.group import Group
from docs_content.models.section import Section, SidebarBehavior


# ---------------------------------------------------------------------------
# In-memory SQLite engine + session factory
#
# A named shared-cache in-memory database lets every session opened by the
# adapter fixture (one per service call) see the same data.  Each test gets
# a unique name so tests are fully isolated from each other.
# ---------------------------------------------------------------------------

@pytest.fixture(scope="function")
def engine():
    """Fresh shared-cache in-memory SQLite engine per test."""
    db_name = f"test_{uuid.uuid4().hex}"
    eng = create_engine(
        f"sqlite:///file:{db_name}?mode=memory&cache=shared&uri=true",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture(scope="function")
def _session_factory(engine):
    """Shared session factory backed by the test engine."""
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture(scope="function")
def session(_session_factory) -> Session:
    """Main test session; closed after each test."""
    s = _session_factory()
    yield s
    s.close()


@pytest.fixture
def store(session) -> ContentStore:
    return ContentStore(session)


# ---------------------------------------------------------------------------
# DB adapter double backed by the shared in-memory engine
# ---------------------------------------------------------------------------

@pytest.fixture
def adapter(_session_factory):
    """
    Adapter whose .session() context-manager creates a **new** session per
    call from the shared in-memory session factory, committing on success and
    rolling back on error like SQLiteAdapter.session().
    """
    adapter = MagicMock()

    @contextmanager
    def scoped_session():
        s = _session_factory()
        try:
            yield s
            s.commit()
        except Exception:
            s.rollback()
            raise
        finally:
            s.close()

    adapter.session.side_effect = scoped_session
    return adapter


# ---------------------------------------------------------------------------
# Model factory helpers
# ---------------------------------------------------------------------------

def make_section(
    session: Session,
    *,
    section_id: str = "getting-started",
    title: str | None = None,
    path: str | None = None,
    index: int = 0,
    sidebar_behavior: str = SidebarBehavior.SHOW_LINKS.value,
    category_ids: list[str] | None = None,
) -> Section:
    section = Section(
        id=section_id,
        title=title or section_id.replace("-", " ").title(),
        description=f"{section_id} section",
        path=path or f"/{section_id}",
        index=index,
        sidebar_behavior=sidebar_behavior,
    )
    section.set_category_ids(category_ids or [])
    session.add(section)
    session.flush()
    return section


def make_category(
    session: Session,
    section: Section,
    *,
    category_id: str = "installation",
    title: str | None = None,
    path: str | None = None,
    index: int = 0,
    group_ids: list[str] | None = None,
) -> Category:
    category = Category(
        id=category_id,
        title=title or category_id.replace("-", " ").title(),
        description=f"{category_id} category",
        path=path or f"{section.path}/{category_id}",
        section_id=section.id,
        index=index,
    )
    category.set_group_ids(group_ids or [])
    session.add(category)
    session.flush()
    return category


def make_group(
    session: Session,
    category: Category,
    *,
    group_id: str = "package-managers",
    title: str | None = None,
    index: int = 0,
    path: str | None = None,
) -> Group:
    group = Group(
        id=group_id,
        section_id=category.section_id,
        category_id=category.id,
        index=index,
        title=title,
        path=path,
    )
    session.add(group)
    session.flush()
    return group


def make_article(
    session: Session,
    category: Category,
    *,
    article_id: str = "quick-start",
    title: str | None = None,
    path: str | None = None,
    section_index: int = 0,
    category_index: int = 0,
    group: Group | None = None,
    group_index: int | None = None,
    status: str = ArticleStatus.PUBLISHED.value,
    content: str | None = None,
    author_id: str | None = None,
    keywords: list[str] | None = None,
) -> Article:
    article = Article(
        id=article_id,
        title=title or article_id.replace("-", " ").title(),
        description=f"About {article_id}",
        content=content if content is not None else f"# {article_id}\n\nBody of {article_id}.",
        path=path or f"{category.path}/{article_id}",
        section_id=category.section_id,
        section_index=section_index,
        category_id=category.id,
        category_index=category_index,
        group_id=group.id if group else None,
        group_index=group_index if group else None,
        status=status,
        author_id=author_id,
    )
    article.set_keywords(keywords or [])
    session.add(article)
    session.flush()
    return article


def make_author(session: Session, *, author_id: str = "steveruizok", name: str = "Steve Ruiz") -> Author:
    author = Author(id=author_id, name=name, image=None, email=None, twitter="@steveruizok")
    session.add(author)
    session.flush()
    return author


# ---------------------------------------------------------------------------
# Sample hierarchy
#
# getting-started (index 0, show-links)
#   installation (index 0)
#     quick-start   s0 c0            published
#     requirements  s1 c1            draft
#     npm           s2 c2  pm g0     published
#     yarn          s3 c3  pm g1     unlisted
#   usage (index 1)
#     editor        s4 c0            published
# reference (index 1, show-title)
#   api (index 0)
#     tldraw        s0 c0            published
#     store         s1 c1            published
# ---------------------------------------------------------------------------

def seed_hierarchy(session: Session) -> dict[str, object]:
    getting_started = make_section(
        session, section_id="getting-started", index=0, category_ids=["installation", "usage"]
    )
    reference = make_section(
        session,
        section_id="reference",
        index=1,
        sidebar_behavior=SidebarBehavior.SHOW_TITLE.value,
        category_ids=["api"],
    )
    installation = make_category(
        session, getting_started, category_id="installation", index=0, group_ids=["package-managers"]
    )
    usage = make_category(session, getting_started, category_id="usage", index=1)
    api = make_category(session, reference, category_id="api", index=0)
    package_managers = make_group(
        session, installation, group_id="package-managers", title="Package managers", index=0
    )

    make_author(session)
    entities: dict[str, object] = {
        "getting-started": getting_started,
        "reference": reference,
        "installation": installation,
        "usage": usage,
        "api": api,
        "package-managers": package_managers,
    }
    entities["quick-start"] = make_article(
        session, installation, article_id="quick-start", section_index=0, category_index=0,
        author_id="steveruizok",
    )
    entities["requirements"] = make_article(
        session, installation, article_id="requirements", section_index=1, category_index=1,
        status=ArticleStatus.DRAFT.value,
    )
    entities["npm"] = make_article(
        session, installation, article_id="npm", section_index=2, category_index=2,
        group=package_managers, group_index=0,
    )
    entities["yarn"] = make_article(
        session, installation, article_id="yarn", section_index=3, category_index=3,
        group=package_managers, group_index=1, status=ArticleStatus.UNLISTED.value,
    )
    entities["editor"] = make_article(
        session, usage, article_id="editor", section_index=4, category_index=0,
    )
    entities["tldraw"] = make_article(
        session, api, article_id="tldraw", section_index=0, category_index=0,
    )
    entities["store"] = make_article(
        session, api, article_id="store", section_index=1, category_index=1,
    )
    session.commit()
    return entities


@pytest.fixture
def hierarchy(session) -> dict[str, object]:
    return seed_hierarchy(session)


# ---------------------------------------------------------------------------
# Snapshot documents (generated-content shape)
# ---------------------------------------------------------------------------

_SAMPLE_DOCUMENT: dict[str, object] = {
    "sections": [
        {
            "id": "docs",
            "title": "Docs",
            "description": "Documentation",
            "path": "/docs",
            "index": 0,
            "sidebar_behavior": "show-links",
            "categories": [
                {
                    "id": "editor",
                    "title": "Editor",
                    "description": None,
                    "path": "/docs/editor",
                    "index": 0,
                    "groups": [
                        {"id": "shapes", "title": "Shapes", "index": 0},
                    ],
                },
                {
                    "id": "tools",
                    "title": "Tools",
                    "description": None,
                    "path": "/docs/tools",
                    "index": 1,
                    "groups": [],
                },
            ],
        },
        {
            "id": "examples",
            "title": "Examples",
            "description": "Examples",
            "path": "/examples",
            "index": 1,
            "sidebar_behavior": "show-title",
            "categories": [
                {
                    "id": "basic",
                    "title": "Basic",
                    "description": None,
                    "path": "/examples/basic",
                    "index": 0,
                    "groups": [],
                },
            ],
        },
    ],
    "articles": {
        "introduction": {
            "id": "introduction",
            "title": "Introduction",
            "description": "Start here",
            "content": "## Overview\n\nHello.",
            "path": "/docs/editor/introduction",
            "groupId": None,
            "groupIndex": -1,
            "categoryId": "editor",
            "categoryIndex": 0,
            "sectionId": "docs",
            "sectionIndex": 0,
            "author": "steveruizok",
            "hero": None,
            "status": "published",
            "date": "2023-05-01",
            "keywords": ["intro", "editor"],
            "sourceUrl": None,
        },
        "geo-shape": {
            "id": "geo-shape",
            "title": "Geo shape",
            "description": None,
            "content": "",
            "path": "/docs/editor/geo-shape",
            "groupId": "shapes",
            "groupIndex": 0,
            "categoryId": "editor",
            "categoryIndex": 1,
            "sectionId": "docs",
            "sectionIndex": 1,
            "author": None,
            "status": "draft",
            "keywords": [],
        },
        "select-tool": {
            "id": "select-tool",
            "title": "Select tool",
            "path": "/docs/tools/select-tool",
            "categoryId": "tools",
            "categoryIndex": 0,
            "sectionId": "docs",
            "sectionIndex": 2,
            "status": "published",
        },
        "readonly": {
            "id": "readonly",
            "title": "Read-only",
            "path": "/examples/basic/readonly",
            "categoryId": "basic",
            "categoryIndex": 0,
            "sectionId": "examples",
            "sectionIndex": 0,
            "status": "unlisted",
        },
    },
    "authors": [
        {"id": "steveruizok", "name": "Steve Ruiz", "twitter": "@steveruizok"},
    ],
}


def sample_document() -> dict[str, object]:
    """A fresh, valid snapshot document (safe to mutate)."""
    return copy.deepcopy(_SAMPLE_DOCUMENT)
