"""Validate a content snapshot JSON file and publish it to the content database."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(root))

    from dotenv import load_dotenv

    load_dotenv()

    from constants import DATA_DIR, SNAPSHOT_FILENAME
    from docs_content.db import get_default_adapter
    from docs_content.errors import IntegrityViolation, SnapshotFormatError
    from docs_content.services.snapshot import load_snapshot_file

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "snapshot",
        nargs="?",
        default=str(DATA_DIR / SNAPSHOT_FILENAME),
        help="Path to the generated content JSON (default: DATA_DIR/SNAPSHOT_FILENAME).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every integrity problem.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    adapter = get_default_adapter()
    adapter.create_tables()
    try:
        counts = load_snapshot_file(adapter, args.snapshot)
    except IntegrityViolation as exc:
        print(f"Snapshot rejected ({len(exc.problems)} problems):")
        for problem in exc.problems:
            print(f"  - {problem}")
        return 1
    except (SnapshotFormatError, FileNotFoundError) as exc:
        print(f"Snapshot could not be read: {exc}")
        return 1

    print("Snapshot published:")
    for table, count in counts.items():
        print(f"  {table}: {count}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
