from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import Role, SalaryType, UserStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, name, email, role, status, salary, salary_type, designation"


def _to_user(row: Dict[str, Any]) -> User:
    return User(
        user_id=int(row["user_id"]),
        name=row["name"],
        email=row["email"],
        role=Role(row["role"]),
        status=UserStatus(row.get("status") or UserStatus.ACTIVE.value),
        salary=as_decimal(row["salary"]) if row.get("salary") is not None else None,
        salary_type=SalaryType(row.get("salary_type") or SalaryType.MONTHLY.value),
        designation=row.get("designation"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def list_by_role(self, role: Role, *, active_only: bool = False) -> Sequence[User]:
        sql = f"SELECT {_COLUMNS} FROM users WHERE role=%s"
        params: list[object] = [role.value]
        if active_only:
            sql += " AND status=%s"
            params.append(UserStatus.ACTIVE.value)
        sql += " ORDER BY user_id ASC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_user(r) for r in fetchall(cur)]

    def count_by_role(self, role: Role, *, active_only: bool = False) -> int:
        sql = "SELECT COUNT(*) AS n FROM users WHERE role=%s"
        params: list[object] = [role.value]
        if active_only:
            sql += " AND status=%s"
            params.append(UserStatus.ACTIVE.value)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            row = fetchone(cur)
            return int(row["n"]) if row else 0
