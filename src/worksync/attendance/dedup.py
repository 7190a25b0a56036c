"""Offline repair: collapse duplicate (user, work_date) attendance records."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CleanupResult:
    groups: int
    removed: int


class DuplicateAttendanceCleaner:
    """Keeps the earliest-created record of every duplicate group.

    Running it again after a successful pass finds no groups and removes nothing.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def run(self, *, dry_run: bool = False) -> CleanupResult:
        groups = self._attendance.find_duplicate_groups()
        logger.info("found %d duplicate attendance groups", len(groups))

        removed = 0
        for group in groups:
            keep, *extra = group.attendance_ids
            if dry_run:
                logger.info(
                    "would remove %s for user %s on %s (keeping %s)",
                    extra, group.user_id, group.work_date, keep,
                )
                continue
            deleted = self._attendance.delete_by_ids(extra)
            removed += deleted
            logger.info(
                "cleaned user %s on %s: removed %d, kept %s",
                group.user_id, group.work_date, deleted, keep,
            )

        return CleanupResult(groups=len(groups), removed=removed)
