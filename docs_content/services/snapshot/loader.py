"""Publish a validated snapshot into the content tables."""

import json
import logging
from pathlib import Path
from typing import Any

from sqlalchemy.orm import Session

from docs_content.db import DBAdapter
from docs_content.db_managers import SnapshotManager
from docs_content.errors import SnapshotFormatError
from docs_content.services.snapshot.parser import Snapshot, parse_snapshot
from docs_content.services.snapshot.validator import validate_snapshot

logger = logging.getLogger(__name__)


def publish_snapshot(session: Session, snapshot: Snapshot) -> dict[str, int]:
    """Validate, then replace every content row with the snapshot's rows.

    Runs inside the caller's session; an exception here leaves the previous
    snapshot in place once the session rolls back.
    """
    validate_snapshot(snapshot)
    manager = SnapshotManager(session)
    deleted = manager.clear_all()
    logger.debug("Cleared previous snapshot rows: %s", deleted)
    manager.add_all(
        sections=snapshot.sections,
        categories=snapshot.categories,
        groups=snapshot.groups,
        articles=snapshot.articles,
        authors=snapshot.authors,
    )
    counts = snapshot.counts()
    logger.info(
        "Snapshot published sections=%d categories=%d groups=%d articles=%d authors=%d",
        counts["sections"], counts["categories"], counts["groups"], counts["articles"], counts["authors"],
    )
    return counts


def load_snapshot_document(adapter: DBAdapter, document: dict[str, Any]) -> dict[str, int]:
    snapshot = parse_snapshot(document)
    with adapter.session() as session:
        return publish_snapshot(session, snapshot)


def read_snapshot_file(path: str | Path) -> dict[str, Any]:
    path = Path(path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise SnapshotFormatError(f"{path}: not valid UTF-8 ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise SnapshotFormatError(f"{path}: invalid JSON ({exc})") from exc
    if not isinstance(document, dict):
        raise SnapshotFormatError(f"{path}: snapshot document must be a JSON object")
    return document


def load_snapshot_file(adapter: DBAdapter, path: str | Path) -> dict[str, int]:
    """Read a snapshot JSON file and publish it through the adapter."""
    logger.info("Loading snapshot from %s", path)
    return load_snapshot_document(adapter, read_snapshot_file(path))
