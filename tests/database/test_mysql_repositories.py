import re
from datetime import date, datetime, timedelta
from decimal import Decimal

from guard_timesheets.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from guard_timesheets.core.enums import AttendanceStatus, TimesheetStatus
from guard_timesheets.directory.mysql_directory_repository import MySQLDirectoryRepository
from guard_timesheets.directory.names import NameDirectory
from guard_timesheets.shifts.mysql_shift_repository import MySQLShiftRepository


class TableCursor:
    """Answers every SELECT with the rows stored for the table it reads."""

    def __init__(self, tables):
        self._tables = tables
        self._rows = []
        self.rowcount = 0

    def execute(self, sql, params=()):
        table = re.search(r"FROM\s+(\w+)", sql).group(1)
        self._rows = list(self._tables.get(table, []))
        self.rowcount = len(self._rows)

    def fetchall(self):
        return self._rows

    def close(self):
        pass


class TableConnection:
    def __init__(self, tables):
        self._tables = tables

    def cursor(self, dictionary=False):
        return TableCursor(self._tables)

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class TableStore:
    def __init__(self, **tables):
        self._tables = tables

    def connect(self):
        return TableConnection(self._tables)


def test_integer_ids_resolve_to_names():
    store = TableStore(
        shifts=[
            {
                "shift_id": 11,
                "shift_date": date(2025, 12, 1),
                "start_time": timedelta(hours=9),
                "end_time": timedelta(hours=17),
                "site_id": 7,
                "client_id": 3,
                "hourly_rate": Decimal("25.00"),
            }
        ],
        sites=[{"site_id": 7, "site_name": "Canary Wharf"}],
        clients=[{"client_id": 3, "company_name": "Acme Holdings"}],
    )
    directory = MySQLDirectoryRepository(store)

    (shift,) = MySQLShiftRepository(store).list_all()
    names = NameDirectory.build(sites=directory.list_sites(), clients=directory.list_clients())

    assert (shift.shift_id, shift.site_id, shift.client_id) == ("11", "7", "3")
    assert (shift.start_time, shift.end_time) == ("09:00", "17:00")
    assert names.site_name(shift.site_id) == "Canary Wharf"
    assert names.client_name(shift.client_id) == "Acme Holdings"


def test_shift_without_site_or_client_keeps_none():
    store = TableStore(
        shifts=[
            {"shift_id": 12, "shift_date": None, "start_time": None, "end_time": None, "site_id": None, "client_id": None}
        ]
    )

    (shift,) = MySQLShiftRepository(store).list_all()

    assert shift.site_id is None
    assert shift.client_id is None


def test_unknown_stored_statuses_fall_back_to_defaults():
    store = TableStore(
        shift_assignments=[
            {
                "assignment_id": 1,
                "shift_id": 11,
                "guard_id": 5,
                "check_in_time": datetime(2025, 12, 1, 9, 0),
                "check_out_time": None,
                "break_minutes": None,
                "status": "cancelled",
                "timesheet_status": "escalated",
            },
            {
                "assignment_id": 2,
                "shift_id": 11,
                "guard_id": 6,
                "check_in_time": None,
                "check_out_time": None,
                "break_minutes": 15,
                "status": "checked-in",
                "timesheet_status": "approved",
            },
        ]
    )

    first, second = MySQLAttendanceRepository(store).list_all()

    assert (first.assignment_id, first.guard_id) == ("1", "5")
    assert first.status == AttendanceStatus.ASSIGNED
    assert first.timesheet_status == TimesheetStatus.PENDING
    assert first.break_minutes == 0
    assert second.status == AttendanceStatus.CHECKED_IN
    assert second.timesheet_status == TimesheetStatus.APPROVED
