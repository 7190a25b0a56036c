from datetime import date

from worksync.attendance.model import DuplicateGroup
from worksync.attendance.mysql_attendance_repository import MySQLAttendanceRepository


class RowsCursor:
    def __init__(self, rows):
        self._rows = rows
        self.statements = []

    def execute(self, sql, params=None):
        self.statements.append(sql)

    def fetchall(self):
        return self._rows

    def close(self):
        pass


class RowsConnection:
    def __init__(self, rows):
        self.cur = RowsCursor(rows)

    def cursor(self, dictionary=True):
        return self.cur

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class RowsFactory:
    def __init__(self, rows):
        self.conn = RowsConnection(rows)

    def connect(self):
        return self.conn


def test_duplicate_groups_keep_every_id_of_large_groups():
    day = date(2024, 3, 11)
    # Far beyond what a 1024 byte GROUP_CONCAT could hold.
    big = [{"attendance_id": 1_000_000 + i, "user_id": 1, "work_date": day} for i in range(500)]
    rows = big + [
        {"attendance_id": 7, "user_id": 2, "work_date": day},
        {"attendance_id": 3, "user_id": 2, "work_date": day},
    ]
    factory = RowsFactory(rows)

    groups = MySQLAttendanceRepository(factory).find_duplicate_groups()

    assert len(groups) == 2
    assert groups[0].attendance_ids == tuple(r["attendance_id"] for r in big)
    assert groups[1] == DuplicateGroup(user_id=2, work_date=day, attendance_ids=(7, 3))
    assert "GROUP_CONCAT" not in factory.conn.cur.statements[0]


def test_no_duplicates_gives_no_groups():
    assert MySQLAttendanceRepository(RowsFactory([])).find_duplicate_groups() == []
