"""Collapse duplicate (user, date) attendance records, keeping the earliest.

Safe to re-run: a clean table has no duplicate groups.
"""

from __future__ import annotations

import argparse
import importlib
import sys

from dotenv import load_dotenv

from worksync.common.log import configure_logging
from worksync.config import get_settings_module
from worksync.container import build_container
from worksync.core.exceptions import StorageError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--dry-run", action="store_true", help="report duplicates without deleting")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(db_config=dict(settings.DB_CONFIG))
    try:
        result = container.duplicate_cleaner.run(dry_run=args.dry_run)
    except StorageError as e:
        print(f"Error cleaning duplicates: {e}", file=sys.stderr)
        return 1

    print(f"Found {result.groups} groups with duplicates. Total duplicates removed: {result.removed}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
