from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.constants import SETTINGS_ROW_ID
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import CompanySettings, LeaveQuotas, WorkingHours
from .repository import SettingsRepository


def _to_settings(row: Dict[str, Any]) -> CompanySettings:
    weekend = row.get("weekend_policy") or ""
    return CompanySettings(
        working_hours=WorkingHours(
            check_in=row.get("check_in_time") or None,
            check_out=row.get("check_out_time") or None,
            grace_period=int(row.get("grace_period_minutes") or 0),
        ),
        weekend_policy=tuple(d for d in weekend.split(",") if d),
        leave_quotas=LeaveQuotas(
            annual=int(row.get("annual_leave_days") or 0),
            sick=int(row.get("sick_leave_days") or 0),
            casual=int(row.get("casual_leave_days") or 0),
            maternity=int(row.get("maternity_leave_days") or 0),
        ),
        leave_approval_required=bool(row.get("leave_approval_required")),
        email_notifications=bool(row.get("email_notifications")),
    )


def _to_params(settings: CompanySettings) -> tuple:
    return (
        settings.working_hours.check_in,
        settings.working_hours.check_out,
        int(settings.working_hours.grace_period),
        ",".join(settings.weekend_policy),
        settings.leave_quotas.annual,
        settings.leave_quotas.sick,
        settings.leave_quotas.casual,
        settings.leave_quotas.maternity,
        int(settings.leave_approval_required),
        int(settings.email_notifications),
    )


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[CompanySettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT check_in_time, check_out_time, grace_period_minutes, weekend_policy,
                       annual_leave_days, sick_leave_days, casual_leave_days, maternity_leave_days,
                       leave_approval_required, email_notifications
                FROM company_settings
                WHERE settings_id=%s
                """,
                (SETTINGS_ROW_ID,),
            )
            row = fetchone(cur)
            return _to_settings(row) if row else None

    def create(self, settings: CompanySettings) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO company_settings(
                    settings_id, check_in_time, check_out_time, grace_period_minutes, weekend_policy,
                    annual_leave_days, sick_leave_days, casual_leave_days, maternity_leave_days,
                    leave_approval_required, email_notifications
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (SETTINGS_ROW_ID, *_to_params(settings)),
            )

    def save(self, settings: CompanySettings) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE company_settings
                SET check_in_time=%s, check_out_time=%s, grace_period_minutes=%s, weekend_policy=%s,
                    annual_leave_days=%s, sick_leave_days=%s, casual_leave_days=%s, maternity_leave_days=%s,
                    leave_approval_required=%s, email_notifications=%s
                WHERE settings_id=%s
                """,
                (*_to_params(settings), SETTINGS_ROW_ID),
            )
