"""Parse a generated-content document into unattached model rows.

Accepted shape (camelCase keys, as written by the content build)::

    {
      "sections": [{"id", "title", "description", "path", "index",
                    "sidebar_behavior", "categories": [...]}],
      "categories": [...],        # optional; referenced by id from sections
      "groups": [...],            # optional; referenced by id from categories
      "articles": {"<key>": {...}} or [{...}],
      "authors": {"<id>": {...}} or [{...}]
    }

Sections may nest category objects directly or list category ids; the same
holds for categories and their groups.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable

from docs_content.errors import SnapshotFormatError
from docs_content.models import Article, ArticleStatus, Author, Category, Group, Section, SidebarBehavior


@dataclass
class Snapshot:
    """One content build's rows, not yet attached to any session."""

    sections: list[Section] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    groups: list[Group] = field(default_factory=list)
    articles: list[Article] = field(default_factory=list)
    authors: list[Author] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        return {
            "sections": len(self.sections),
            "categories": len(self.categories),
            "groups": len(self.groups),
            "articles": len(self.articles),
            "authors": len(self.authors),
        }


def _require(data: dict[str, Any], key: str, where: str) -> Any:
    if key not in data or data[key] is None:
        raise SnapshotFormatError(f"{where}: missing required key {key!r}")
    return data[key]


def _first(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _require_any(data: dict[str, Any], where: str, *keys: str) -> Any:
    value = _first(data, *keys)
    if value is None:
        raise SnapshotFormatError(f"{where}: missing required key {keys[0]!r}")
    return value


def _as_int(value: Any, where: str) -> int:
    if isinstance(value, bool):
        raise SnapshotFormatError(f"{where}: expected an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise SnapshotFormatError(f"{where}: expected an integer, got {value!r}") from None


def _as_str_or_none(value: Any) -> str | None:
    return None if value is None else str(value)


def _records(value: Any, where: str) -> list[dict[str, Any]]:
    """Accept a list of objects or an object keyed by id."""
    if value is None:
        return []
    if isinstance(value, dict):
        items: Iterable[Any] = value.values()
    elif isinstance(value, list):
        items = value
    else:
        raise SnapshotFormatError(f"{where}: expected a list or an object, got {type(value).__name__}")
    records = list(items)
    for item in records:
        if not isinstance(item, dict):
            raise SnapshotFormatError(f"{where}: expected objects, got {type(item).__name__}")
    return records


def _parse_group(data: dict[str, Any], *, section_id: str | None, category_id: str | None) -> Group:
    group_id = str(_require(data, "id", "group"))
    where = f"group {group_id!r}"
    parent_section = _first(data, "sectionId", "section_id") or section_id
    parent_category = _first(data, "categoryId", "category_id") or category_id
    if parent_section is None:
        raise SnapshotFormatError(f"{where}: missing required key 'sectionId'")
    if parent_category is None:
        raise SnapshotFormatError(f"{where}: missing required key 'categoryId'")
    return Group(
        id=group_id,
        section_id=str(parent_section),
        category_id=str(parent_category),
        index=_as_int(_require(data, "index", where), f"{where} index"),
        title=_as_str_or_none(data.get("title")),
        description=_as_str_or_none(data.get("description")),
        path=_as_str_or_none(data.get("path")),
    )


def _parse_category(data: dict[str, Any], *, section_id: str | None) -> tuple[Category, list[Group]]:
    category_id = str(_require(data, "id", "category"))
    where = f"category {category_id!r}"
    parent_section = _first(data, "sectionId", "section_id") or section_id
    if parent_section is None:
        raise SnapshotFormatError(f"{where}: missing required key 'sectionId'")

    category = Category(
        id=category_id,
        title=str(_require(data, "title", where)),
        description=_as_str_or_none(data.get("description")),
        path=str(_require(data, "path", where)),
        section_id=str(parent_section),
        index=_as_int(_require(data, "index", where), f"{where} index"),
    )

    group_ids: list[str] = []
    groups: list[Group] = []
    for item in data.get("groups") or []:
        if isinstance(item, dict):
            group = _parse_group(item, section_id=str(parent_section), category_id=category_id)
            groups.append(group)
            group_ids.append(group.id)
        else:
            group_ids.append(str(item))
    category.set_group_ids(group_ids)
    return category, groups


def _parse_section(data: dict[str, Any]) -> tuple[Section, list[Category], list[Group]]:
    section_id = str(_require(data, "id", "section"))
    where = f"section {section_id!r}"
    behavior = _first(data, "sidebar_behavior", "sidebarBehavior") or SidebarBehavior.SHOW_LINKS.value

    section = Section(
        id=section_id,
        title=str(_require(data, "title", where)),
        description=_as_str_or_none(data.get("description")),
        path=str(_require(data, "path", where)),
        index=_as_int(_require(data, "index", where), f"{where} index"),
        sidebar_behavior=str(behavior),
    )

    category_ids: list[str] = []
    categories: list[Category] = []
    groups: list[Group] = []
    for item in data.get("categories") or []:
        if isinstance(item, dict):
            category, category_groups = _parse_category(item, section_id=section_id)
            categories.append(category)
            groups.extend(category_groups)
            category_ids.append(category.id)
        else:
            category_ids.append(str(item))
    section.set_category_ids(category_ids)
    return section, categories, groups


def _parse_article(data: dict[str, Any]) -> Article:
    article_id = str(_require(data, "id", "article"))
    where = f"article {article_id!r}"
    group_id = _as_str_or_none(_first(data, "groupId", "group_id"))
    group_index = _first(data, "groupIndex", "group_index")

    keywords = data.get("keywords") or []
    if not isinstance(keywords, list):
        raise SnapshotFormatError(f"{where}: keywords must be a list")

    article = Article(
        id=article_id,
        title=str(_require(data, "title", where)),
        description=_as_str_or_none(data.get("description")),
        content=_as_str_or_none(data.get("content")),
        path=str(_require(data, "path", where)),
        section_id=str(_require_any(data, where, "sectionId", "section_id")),
        section_index=_as_int(_require_any(data, where, "sectionIndex", "section_index"), f"{where} sectionIndex"),
        category_id=str(_require_any(data, where, "categoryId", "category_id")),
        category_index=_as_int(
            _require_any(data, where, "categoryIndex", "category_index"), f"{where} categoryIndex"
        ),
        group_id=group_id,
        group_index=(
            _as_int(group_index, f"{where} groupIndex")
            if group_id is not None and group_index is not None
            else None
        ),
        status=str(data.get("status") or ArticleStatus.PUBLISHED.value),
        author_id=_as_str_or_none(_first(data, "author", "authorId", "author_id")),
        hero=_as_str_or_none(data.get("hero")),
        date=_as_str_or_none(data.get("date")),
        source_url=_as_str_or_none(_first(data, "sourceUrl", "source_url")),
    )
    article.set_keywords([str(k) for k in keywords])
    return article


def _parse_author(data: dict[str, Any]) -> Author:
    author_id = str(_require(data, "id", "author"))
    return Author(
        id=author_id,
        name=str(_require(data, "name", f"author {author_id!r}")),
        image=_as_str_or_none(data.get("image")),
        email=_as_str_or_none(data.get("email")),
        twitter=_as_str_or_none(data.get("twitter")),
    )


def parse_snapshot(document: dict[str, Any]) -> Snapshot:
    """Build a Snapshot from a decoded content document.

    Only the document's shape is checked here; hierarchy invariants are
    left to validate_snapshot().
    """
    if not isinstance(document, dict):
        raise SnapshotFormatError("Snapshot document must be a JSON object")
    if "sections" not in document:
        raise SnapshotFormatError("Snapshot document has no 'sections'")

    snapshot = Snapshot()
    for data in _records(document.get("sections"), "sections"):
        section, categories, groups = _parse_section(data)
        snapshot.sections.append(section)
        snapshot.categories.extend(categories)
        snapshot.groups.extend(groups)

    for data in _records(document.get("categories"), "categories"):
        category, groups = _parse_category(data, section_id=None)
        snapshot.categories.append(category)
        snapshot.groups.extend(groups)

    for data in _records(document.get("groups"), "groups"):
        snapshot.groups.append(_parse_group(data, section_id=None, category_id=None))

    snapshot.articles.extend(_parse_article(d) for d in _records(document.get("articles"), "articles"))
    snapshot.authors.extend(_parse_author(d) for d in _records(document.get("authors"), "authors"))
    return snapshot
