from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from ..core.enums import SalaryStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_datetime, as_decimal, db_cursor, fetchall, fetchone
from .model import SalaryListRow, SalaryRecord
from .repository import SalaryRepository

_COLUMNS = (
    "s.salary_id, s.user_id, s.salary_month, s.base_salary, s.deductions, s.overtime_credits, "
    "s.total_payable, s.status, s.paid_date, s.created_at"
)


def _to_record(r: Dict[str, Any]) -> SalaryRecord:
    return SalaryRecord(
        salary_id=int(r["salary_id"]),
        user_id=int(r["user_id"]),
        month=r["salary_month"],
        base_salary=as_decimal(r["base_salary"]),
        deductions=as_decimal(r["deductions"]),
        overtime_credits=as_decimal(r.get("overtime_credits")),
        total_payable=as_decimal(r["total_payable"]),
        status=SalaryStatus(r["status"]),
        paid_date=as_datetime(r.get("paid_date")),
        created_at=as_datetime(r.get("created_at")),
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, salary_id: int) -> Optional[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM salary_records s WHERE s.salary_id=%s", (int(salary_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_user_and_month(self, user_id: int, month: str) -> Optional[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM salary_records s WHERE s.user_id=%s AND s.salary_month=%s",
                (int(user_id), month),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_user(self, user_id: int) -> Sequence[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM salary_records s WHERE s.user_id=%s ORDER BY s.created_at DESC",
                (int(user_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[SalaryListRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}, u.name AS employee_name
                FROM salary_records s
                LEFT JOIN users u ON u.user_id = s.user_id
                ORDER BY s.created_at DESC, s.salary_id DESC
                """
            )
            return [SalaryListRow(record=_to_record(r), employee_name=r.get("employee_name")) for r in fetchall(cur)]

    def create(
        self,
        *,
        user_id: int,
        month: str,
        base_salary: Decimal,
        deductions: Decimal,
        total_payable: Decimal,
    ) -> SalaryRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salary_records(user_id, salary_month, base_salary, deductions, total_payable, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(user_id), month, base_salary, deductions, total_payable, SalaryStatus.UNPAID.value),
            )
            salary_id = int(cur.lastrowid)

        return SalaryRecord(
            salary_id=salary_id,
            user_id=int(user_id),
            month=month,
            base_salary=base_salary,
            deductions=deductions,
            total_payable=total_payable,
        )

    def update(
        self,
        *,
        salary_id: int,
        base_salary: Decimal,
        deductions: Decimal,
        total_payable: Decimal,
        status: SalaryStatus,
        paid_date: Optional[datetime],
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE salary_records
                SET base_salary=%s, deductions=%s, total_payable=%s, status=%s, paid_date=%s
                WHERE salary_id=%s
                """,
                (base_salary, deductions, total_payable, status.value, paid_date, int(salary_id)),
            )
