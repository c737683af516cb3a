"""Extract table-of-contents headings from an article's markdown body."""

import re
from dataclasses import dataclass

from constants import HEADING_MAX_LEVEL, HEADING_MIN_LEVEL

_HEADING_RE = re.compile(r"^(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")
_FENCE_RE = re.compile(r"^[ \t]{0,3}(`{3,}|~{3,})")
_CODE_SPAN_RE = re.compile(r"^`([^`]+)`$")


@dataclass(frozen=True)
class ArticleHeading:
    level: int
    title: str
    slug: str
    is_code: bool

    def to_dict(self) -> dict[str, object]:
        return {
            "level": self.level,
            "title": self.title,
            "slug": self.slug,
            "isCode": self.is_code,
        }


def heading_slug(title: str) -> str:
    """Convert heading text to an anchor slug."""
    slug = re.sub(r"[^\w\s-]", "", title)
    slug = re.sub(r"[-\s]+", "-", slug).strip("-").lower()
    return slug or "section"


def extract_headings(markdown: str | None) -> list[ArticleHeading]:
    """Collect ATX headings outside fenced code blocks, in document order.

    Repeated slugs get "-1", "-2", ... suffixes so every anchor is unique.
    """
    if not markdown:
        return []

    headings: list[ArticleHeading] = []
    seen: dict[str, int] = {}
    fence: str | None = None

    for line in markdown.splitlines():
        fence_match = _FENCE_RE.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
            elif marker[0] == fence[0] and len(marker) >= len(fence):
                fence = None
            continue
        if fence is not None:
            continue

        match = _HEADING_RE.match(line)
        if not match:
            continue
        level = len(match.group(1))
        if level < HEADING_MIN_LEVEL or level > HEADING_MAX_LEVEL:
            continue

        text = match.group(2).strip()
        code = _CODE_SPAN_RE.match(text)
        title = code.group(1) if code else text

        base = heading_slug(title)
        slug = base
        while slug in seen:
            seen[base] += 1
            slug = f"{base}-{seen[base]}"
        seen[slug] = 0

        headings.append(ArticleHeading(level=level, title=title, slug=slug, is_code=code is not None))

    return headings
