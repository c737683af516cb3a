"""App constants, overridable via environment variables."""

import os
from pathlib import Path

_REPO_ROOT = Path(__file__).resolve().parent

# Data directory; default "data" under repo root, overridable via DATA_DIR env
DATA_DIR = Path(os.environ["DATA_DIR"]) if os.environ.get("DATA_DIR") else _REPO_ROOT / "data"

# SQLite file holding the published content snapshot, relative to DATA_DIR.
CONTENT_DB_FILENAME: str = os.environ.get("CONTENT_DB_FILENAME", "content.db")

# Snapshot document produced by the content build, relative to DATA_DIR.
SNAPSHOT_FILENAME: str = os.environ.get("SNAPSHOT_FILENAME", "content.json")

# ── Paths ─────────────────────────────────────────────────────────────────────
# Separator used by every content path ("/section/category/article").
PATH_SEPARATOR = "/"

# Deepest addressable path: section, category, article.
MAX_PATH_SEGMENTS: int = 3

# ── Headings ──────────────────────────────────────────────────────────────────
# Heading levels collected for an article's table of contents.
HEADING_MIN_LEVEL: int = 2
HEADING_MAX_LEVEL: int = 6
