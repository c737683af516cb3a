"""Check a Snapshot against the hierarchy invariants before it is published."""

import logging
from collections import defaultdict
from typing import Iterable

from constants import MAX_PATH_SEGMENTS
from docs_content.errors import IntegrityViolation
from docs_content.models import ArticleStatus, SidebarBehavior
from docs_content.services.snapshot.parser import Snapshot
from docs_content.utils.content_paths import is_normalized_path, split_path

logger = logging.getLogger(__name__)

_STATUSES = {s.value for s in ArticleStatus}
_BEHAVIORS = {b.value for b in SidebarBehavior}


def _check_unique_ids(label: str, ids: Iterable[str], problems: list[str]) -> None:
    seen: set[str] = set()
    for entity_id in ids:
        if entity_id in seen:
            problems.append(f"Duplicate {label} id {entity_id!r}")
        seen.add(entity_id)


def _check_contiguous(scope: str, indices: list[int | None], problems: list[str]) -> None:
    """Indices within one sibling scope must be exactly 0..n-1."""
    if any(i is None for i in indices):
        problems.append(f"{scope}: missing index")
        return
    ordered = sorted(indices)
    if ordered != list(range(len(ordered))):
        problems.append(f"{scope}: indices {ordered} are not contiguous 0..{len(ordered) - 1}")


def _check_order_agrees(scope: str, members: list, outer: str, inner: str, problems: list[str]) -> None:
    """Members sorted by the narrower index must also ascend by the wider one."""
    if any(getattr(m, outer) is None or getattr(m, inner) is None for m in members):
        return
    ordered = sorted(members, key=lambda m: getattr(m, inner))
    for before, after in zip(ordered, ordered[1:]):
        if getattr(before, outer) >= getattr(after, outer):
            problems.append(
                f"{scope}: article {after.id!r} comes after {before.id!r} by {inner} "
                f"but not by {outer}"
            )


def _check_paths(snapshot: Snapshot, problems: list[str]) -> None:
    owners: dict[str, str] = {}
    entries: list[tuple[str, str | None]] = []
    entries.extend((f"section {s.id!r}", s.path) for s in snapshot.sections)
    entries.extend((f"category {c.id!r}", c.path) for c in snapshot.categories)
    entries.extend((f"group {g.id!r}", g.path) for g in snapshot.groups if g.path is not None)
    entries.extend((f"article {a.id!r}", a.path) for a in snapshot.articles)

    for owner, path in entries:
        if not path or not is_normalized_path(path):
            problems.append(f"{owner}: path {path!r} is not normalized")
            continue
        if len(split_path(path)) > MAX_PATH_SEGMENTS:
            problems.append(f"{owner}: path {path!r} has more than {MAX_PATH_SEGMENTS} segments")
        if path in owners:
            problems.append(f"{owner}: path {path!r} already used by {owners[path]}")
        else:
            owners[path] = owner


def collect_problems(snapshot: Snapshot) -> list[str]:
    """Return every invariant violation in the snapshot (empty when valid)."""
    problems: list[str] = []

    _check_unique_ids("section", (s.id for s in snapshot.sections), problems)
    _check_unique_ids("category", (c.id for c in snapshot.categories), problems)
    _check_unique_ids("group", (g.id for g in snapshot.groups), problems)
    _check_unique_ids("article", (a.id for a in snapshot.articles), problems)
    _check_unique_ids("author", (a.id for a in snapshot.authors), problems)
    _check_paths(snapshot, problems)

    sections = {s.id: s for s in snapshot.sections}
    categories = {c.id: c for c in snapshot.categories}
    groups = {g.id: g for g in snapshot.groups}
    author_ids = {a.id for a in snapshot.authors}

    _check_contiguous("sections", [s.index for s in snapshot.sections], problems)
    for section in snapshot.sections:
        if section.sidebar_behavior not in _BEHAVIORS:
            problems.append(f"section {section.id!r}: unknown sidebar behavior {section.sidebar_behavior!r}")

    categories_by_section: dict[str, list] = defaultdict(list)
    for category in snapshot.categories:
        if category.section_id not in sections:
            problems.append(f"category {category.id!r}: unknown section {category.section_id!r}")
            continue
        categories_by_section[category.section_id].append(category)

    for section in snapshot.sections:
        owned = sorted(categories_by_section.get(section.id, []), key=lambda c: c.index)
        _check_contiguous(f"categories of section {section.id!r}", [c.index for c in owned], problems)
        listed = section.get_category_ids()
        if listed != [c.id for c in owned]:
            problems.append(
                f"section {section.id!r}: category list {listed} does not match owned categories "
                f"{[c.id for c in owned]} in index order"
            )

    groups_by_category: dict[str, list] = defaultdict(list)
    for group in snapshot.groups:
        category = categories.get(group.category_id)
        if category is None:
            problems.append(f"group {group.id!r}: unknown category {group.category_id!r}")
            continue
        if group.section_id not in sections:
            problems.append(f"group {group.id!r}: unknown section {group.section_id!r}")
            continue
        if category.section_id != group.section_id:
            problems.append(
                f"group {group.id!r}: category {category.id!r} belongs to section "
                f"{category.section_id!r}, not {group.section_id!r}"
            )
            continue
        groups_by_category[group.category_id].append(group)

    for category in snapshot.categories:
        owned = sorted(groups_by_category.get(category.id, []), key=lambda g: g.index)
        _check_contiguous(f"groups of category {category.id!r}", [g.index for g in owned], problems)
        listed = category.get_group_ids()
        if listed != [g.id for g in owned]:
            problems.append(
                f"category {category.id!r}: group list {listed} does not match owned groups "
                f"{[g.id for g in owned]} in index order"
            )

    by_section: dict[str, list] = defaultdict(list)
    by_category: dict[str, list] = defaultdict(list)
    by_group: dict[str, list] = defaultdict(list)
    for article in snapshot.articles:
        where = f"article {article.id!r}"
        if article.status not in _STATUSES:
            problems.append(f"{where}: unknown status {article.status!r}")
        if article.author_id is not None and article.author_id not in author_ids:
            problems.append(f"{where}: unknown author {article.author_id!r}")
        if article.section_id not in sections:
            problems.append(f"{where}: unknown section {article.section_id!r}")
            continue
        category = categories.get(article.category_id)
        if category is None:
            problems.append(f"{where}: unknown category {article.category_id!r}")
            continue
        if category.section_id != article.section_id:
            problems.append(
                f"{where}: category {category.id!r} is not in section {article.section_id!r}"
            )
            continue
        if article.group_id is not None:
            group = groups.get(article.group_id)
            if group is None:
                problems.append(f"{where}: unknown group {article.group_id!r}")
                continue
            if group.category_id != article.category_id:
                problems.append(f"{where}: group {group.id!r} is not in category {article.category_id!r}")
                continue
            by_group[article.group_id].append(article)
        by_section[article.section_id].append(article)
        by_category[article.category_id].append(article)

    for section_id, members in by_section.items():
        _check_contiguous(
            f"article sectionIndex in section {section_id!r}", [a.section_index for a in members], problems
        )
    for category_id, members in by_category.items():
        _check_contiguous(
            f"article categoryIndex in category {category_id!r}", [a.category_index for a in members], problems
        )
        _check_order_agrees(
            f"category {category_id!r}", members, "section_index", "category_index", problems
        )
    for group_id, members in by_group.items():
        _check_contiguous(
            f"article groupIndex in group {group_id!r}", [a.group_index for a in members], problems
        )
        _check_order_agrees(
            f"group {group_id!r}", members, "category_index", "group_index", problems
        )

    return problems


def validate_snapshot(snapshot: Snapshot) -> None:
    """Raise IntegrityViolation listing every problem; return silently when valid."""
    problems = collect_problems(snapshot)
    if problems:
        logger.error("Snapshot rejected with %d integrity problems", len(problems))
        for problem in problems:
            logger.debug("Integrity problem: %s", problem)
        raise IntegrityViolation(problems)
