from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from itertools import groupby
from typing import Any, Collection, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_datetime, as_decimal, db_cursor, fetchall, fetchone
from .model import AttendanceLogRow, AttendanceRecord, DuplicateGroup
from .repository import AttendanceRepository

_COLUMNS = (
    "ar.attendance_id, ar.user_id, ar.work_date, ar.check_in_time, ar.check_out_time, "
    "ar.working_hours, ar.overtime_hours, ar.status, ar.created_at"
)


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        user_id=int(r["user_id"]),
        work_date=r["work_date"],
        check_in_time=as_datetime(r.get("check_in_time")),
        check_out_time=as_datetime(r.get("check_out_time")),
        status=AttendanceStatus(r["status"]),
        working_hours=as_decimal(r.get("working_hours")),
        overtime_hours=as_decimal(r.get("overtime_hours")),
        created_at=as_datetime(r.get("created_at")),
    )


def _placeholders(n: int) -> str:
    return ",".join(["%s"] * n)


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records ar
                WHERE ar.user_id=%s AND ar.work_date=%s
                """,
                (int(user_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_user_between(self, user_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records ar
                WHERE ar.user_id=%s AND ar.work_date BETWEEN %s AND %s
                ORDER BY ar.work_date ASC
                """,
                (int(user_id), start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def count_for_user_between(
        self,
        user_id: int,
        start_date: date,
        end_date: date,
        *,
        statuses: Collection[AttendanceStatus],
    ) -> int:
        if not statuses:
            return 0
        values = [s.value for s in statuses]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT COUNT(*) AS n
                FROM attendance_records
                WHERE user_id=%s AND work_date BETWEEN %s AND %s AND status IN ({_placeholders(len(values))})
                """,
                (int(user_id), start_date, end_date, *values),
            )
            row = fetchone(cur)
            return int(row["n"]) if row else 0

    def count_on_date(self, work_date: date, *, status: AttendanceStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS n FROM attendance_records WHERE work_date=%s AND status=%s",
                (work_date, status.value),
            )
            row = fetchone(cur)
            return int(row["n"]) if row else 0

    def list_logs(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[AttendanceStatus] = None,
    ) -> Sequence[AttendanceLogRow]:
        clauses: list[str] = []
        params: list[object] = []

        if start_date is not None:
            clauses.append("ar.work_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("ar.work_date <= %s")
            params.append(end_date)
        if status is not None:
            clauses.append("ar.status = %s")
            params.append(status.value)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}, u.name AS user_name, u.email AS user_email, u.designation
                FROM attendance_records ar
                JOIN users u ON u.user_id = ar.user_id
                {where}
                ORDER BY ar.work_date DESC, ar.user_id ASC
                """,
                tuple(params),
            )
            return [
                AttendanceLogRow(
                    record=_to_record(r),
                    user_name=r["user_name"],
                    user_email=r["user_email"],
                    designation=r.get("designation"),
                )
                for r in fetchall(cur)
            ]

    def create_checkin(
        self,
        *,
        user_id: int,
        work_date: date,
        check_in_time: datetime,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(user_id, work_date, check_in_time, status)
                VALUES(%s,%s,%s,%s)
                """,
                (int(user_id), work_date, check_in_time, status.value),
            )
            attendance_id = int(cur.lastrowid)

        return AttendanceRecord(
            attendance_id=attendance_id,
            user_id=int(user_id),
            work_date=work_date,
            check_in_time=check_in_time,
            check_out_time=None,
            status=status,
        )

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        working_hours: Decimal,
        overtime_hours: Decimal,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            # check_out_time IS NULL guards against a concurrent second check-out.
            cur.execute(
                """
                UPDATE attendance_records
                SET check_out_time=%s, working_hours=%s, overtime_hours=%s
                WHERE attendance_id=%s AND check_out_time IS NULL
                """,
                (check_out_time, working_hours, overtime_hours, int(attendance_id)),
            )
            return cur.rowcount > 0

    def find_duplicate_groups(self) -> Sequence[DuplicateGroup]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT ar.attendance_id, ar.user_id, ar.work_date
                FROM attendance_records ar
                JOIN (
                    SELECT user_id, work_date
                    FROM attendance_records
                    GROUP BY user_id, work_date
                    HAVING COUNT(*) > 1
                ) dup ON dup.user_id = ar.user_id AND dup.work_date = ar.work_date
                ORDER BY ar.user_id ASC, ar.work_date ASC, ar.created_at ASC, ar.attendance_id ASC
                """
            )
            rows = fetchall(cur)

        return [
            DuplicateGroup(
                user_id=int(user_id),
                work_date=work_date,
                attendance_ids=tuple(int(r["attendance_id"]) for r in group),
            )
            for (user_id, work_date), group in groupby(rows, key=lambda r: (r["user_id"], r["work_date"]))
        ]

    def delete_by_ids(self, attendance_ids: Collection[int]) -> int:
        ids = [int(i) for i in attendance_ids]
        if not ids:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"DELETE FROM attendance_records WHERE attendance_id IN ({_placeholders(len(ids))})",
                tuple(ids),
            )
            return int(cur.rowcount)
