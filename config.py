"""Config for navigation and route enumeration policies."""

import os


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


# Sidebar handling of unlisted articles: "hide", "show" or "active-only".
SIDEBAR_UNLISTED_POLICY: str = os.environ.get("SIDEBAR_UNLISTED_POLICY", "active-only")

# Route enumeration: whether unlisted / draft articles get a pre-registered route.
ENUMERATE_UNLISTED_ARTICLES: bool = _env_flag("ENUMERATE_UNLISTED_ARTICLES", "true")
ENUMERATE_DRAFT_ARTICLES: bool = _env_flag("ENUMERATE_DRAFT_ARTICLES", "true")
