from datetime import date, datetime

import pytest

from guard_timesheets.attendance.model import AttendanceRecord
from guard_timesheets.core.enums import AttendanceStatus, DateRange, Role, TimeStatus, TimesheetStatus, TimesheetView
from guard_timesheets.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from guard_timesheets.shifts.model import ShiftSchedule
from guard_timesheets.timesheets.model import TimesheetFilters
from guard_timesheets.timesheets.service import EXPORT_FIELDS, TimesheetService

TODAY = date(2025, 12, 3)


def _shift(shift_id, day, client_id, site_id):
    return ShiftSchedule(
        shift_id=shift_id, shift_date=day, start_time="09:00", end_time="17:00", site_id=site_id, client_id=client_id
    )


SHIFTS = [
    _shift("sh1", date(2025, 12, 1), "c1", "s1"),
    _shift("sh2", TODAY, "c2", "s2"),
    _shift("sh3", date(2025, 10, 1), "c1", "s1"),
]

RECORDS = [
    AttendanceRecord(
        assignment_id="a1",
        shift_id="sh1",
        guard_id="g1",
        check_in_time=datetime(2025, 12, 1, 9, 7),
        check_out_time=datetime(2025, 12, 1, 17, 2),
        break_minutes=30,
        status=AttendanceStatus.COMPLETED,
    ),
    AttendanceRecord(
        assignment_id="a2",
        shift_id="sh2",
        guard_id="g2",
        check_in_time=datetime(2025, 12, 3, 9, 0),
        status=AttendanceStatus.CHECKED_IN,
    ),
    AttendanceRecord(assignment_id="a3", shift_id="sh2", guard_id="g1"),
    AttendanceRecord(
        assignment_id="a4",
        shift_id="sh3",
        guard_id="g2",
        check_in_time=datetime(2025, 10, 1, 9, 0),
        check_out_time=datetime(2025, 10, 1, 16, 0),
    ),
    AttendanceRecord(assignment_id="a5", shift_id="gone", guard_id="g1"),
]


@pytest.fixture
def repos(make_repos):
    return make_repos(shifts=SHIFTS, records=RECORDS)


@pytest.fixture
def service(repos):
    return TimesheetService(repos.attendance, repos.shifts, repos.directory)


def _ids(entries):
    return [e.record.assignment_id for e in entries]


def test_entry_is_enriched_with_names_status_and_violations(service):
    entries = service.list_entries(TimesheetFilters(date_range=DateRange.ALL), today=TODAY)
    a1 = next(e for e in entries if e.record.assignment_id == "a1")

    assert (a1.guard_name, a1.client_name, a1.site_name) == ("Jane Doe", "Acme Holdings", "Canary Wharf")
    assert a1.status == TimeStatus.COMPLETE
    assert a1.scheduled_hours == 8.0
    assert round(a1.actual_hours, 2) == 7.92
    assert [v.message for v in a1.violations] == ["Late by 7m"]
    assert a1.disputed is False


def test_entry_without_shift(service):
    entries = service.list_entries(TimesheetFilters(date_range=DateRange.ALL), today=TODAY)
    orphan = entries[-1]

    assert orphan.record.assignment_id == "a5"
    assert (orphan.client_name, orphan.site_name) == ("Unknown", "Unknown")
    assert orphan.scheduled_hours == 0.0
    assert orphan.actual_hours is None
    assert orphan.status == TimeStatus.PENDING


@pytest.mark.parametrize(
    "date_range, expected",
    [
        (DateRange.TODAY, ["a2", "a3"]),
        (DateRange.WEEK, ["a2", "a3", "a1"]),
        (DateRange.MONTH, ["a2", "a3", "a1"]),
        (DateRange.ALL, ["a2", "a3", "a1", "a4", "a5"]),
    ],
)
def test_date_range_filter(service, date_range, expected):
    assert _ids(service.list_entries(TimesheetFilters(date_range=date_range), today=TODAY)) == expected


@pytest.mark.parametrize(
    "filters, expected",
    [
        (TimesheetFilters(date_range=DateRange.ALL, guard_id="g1"), ["a3", "a1", "a5"]),
        (TimesheetFilters(date_range=DateRange.ALL, client_id="c2"), ["a2", "a3"]),
        (TimesheetFilters(date_range=DateRange.ALL, view=TimesheetView.PENDING), ["a2", "a3", "a5"]),
        (TimesheetFilters(date_range=DateRange.ALL, view=TimesheetView.APPROVED), ["a1"]),
        (TimesheetFilters(date_range=DateRange.ALL, view=TimesheetView.DISPUTED), ["a4"]),
        (TimesheetFilters(date_range=DateRange.ALL, search=" Docklands "), ["a2", "a3"]),
        (TimesheetFilters(date_range=DateRange.ALL, search="patel"), ["a2", "a4"]),
    ],
)
def test_filters(service, filters, expected):
    assert _ids(service.list_entries(filters, today=TODAY)) == expected


def test_short_disputed_entry_reports_break(service):
    entries = service.list_entries(TimesheetFilters(date_range=DateRange.ALL, view=TimesheetView.DISPUTED), today=TODAY)

    (a4,) = entries
    assert a4.status == TimeStatus.SHORT
    assert [v.message for v in a4.violations] == ["Left early by 60m", "Break short/missing (0/30m)"]


def test_stats(service):
    stats = service.stats(service.list_entries(TimesheetFilters(date_range=DateRange.ALL), today=TODAY))

    assert stats.total_entries == 5
    assert stats.completed == 2
    assert stats.in_progress == 1
    assert stats.pending == 2
    assert stats.total_hours == 14.92
    assert stats.overtime_hours == 0.0


def test_export_rows(service):
    entries = service.list_entries(TimesheetFilters(date_range=DateRange.ALL), today=TODAY)
    rows = service.export_rows(entries)

    assert all(list(row) == EXPORT_FIELDS for row in rows)
    a1 = rows[2]
    assert a1["Date"] == "2025-12-01"
    assert a1["Guard"] == "Jane Doe"
    assert a1["Scheduled Hours"] == "8.00"
    assert a1["Check In"] == "2025-12-01T09:07:00"
    assert a1["Actual Hours"] == "7.92"
    assert a1["Status"] == "Complete"
    assert a1["Violations"] == "Late by 7m"

    orphan = rows[4]
    assert orphan["Date"] == "N/A"
    assert orphan["Check Out"] == "N/A"
    assert orphan["Actual Hours"] == "N/A"
    assert orphan["Status"] == "Not Started"


def test_admin_edit_sets_status_from_times(service, repos):
    status = service.edit_entry(
        current_role=Role.ADMIN,
        assignment_id="a3",
        check_in_time="2025-12-03T09:02:00",
        check_out_time="",
    )

    assert status == AttendanceStatus.CHECKED_IN
    assert repos.attendance.updated["check_in_time"] == datetime(2025, 12, 3, 9, 2)
    assert repos.attendance.updated["check_out_time"] is None


def test_admin_edit_complete_and_clear(service, repos):
    assert (
        service.edit_entry(
            current_role=Role.ADMIN,
            assignment_id="a2",
            check_in_time="2025-12-03T09:00:00",
            check_out_time="2025-12-03T17:00:00",
        )
        == AttendanceStatus.COMPLETED
    )
    assert repos.attendance.get_by_id("a2").is_completed

    assert (
        service.edit_entry(current_role=Role.ADMIN, assignment_id="a2", check_in_time=None, check_out_time=None)
        == AttendanceStatus.ASSIGNED
    )


@pytest.mark.parametrize(
    "check_in, check_out, field",
    [
        ("not a time", None, "check_in_time"),
        (None, "2025-12-03T17:00:00", "check_in_time"),
        ("2025-12-03T17:00:00", "2025-12-03T09:00:00", "check_out_time"),
    ],
)
def test_admin_edit_rejects_bad_times(service, repos, check_in, check_out, field):
    with pytest.raises(ValidationError) as exc:
        service.edit_entry(current_role=Role.ADMIN, assignment_id="a3", check_in_time=check_in, check_out_time=check_out)

    assert field in exc.value.field_errors
    assert repos.attendance.updated is None


def test_edit_requires_admin(service):
    with pytest.raises(AuthorizationError):
        service.edit_entry(current_role=Role.STAFF, assignment_id="a3", check_in_time=None, check_out_time=None)


def test_edit_unknown_entry(service):
    with pytest.raises(NotFoundError):
        service.edit_entry(current_role=Role.ADMIN, assignment_id="zzz", check_in_time=None, check_out_time=None)


def test_approve_then_reviewing_again_fails(service, repos):
    service.approve(current_role=Role.ADMIN, assignment_id="a1")
    assert repos.attendance.get_by_id("a1").timesheet_status == TimesheetStatus.APPROVED

    with pytest.raises(ValidationError):
        service.reject(current_role=Role.ADMIN, assignment_id="a1")


def test_reject(service, repos):
    service.reject(current_role=Role.ADMIN, assignment_id="a4")
    assert repos.attendance.get_by_id("a4").timesheet_status == TimesheetStatus.REJECTED


def test_review_requires_admin(service):
    with pytest.raises(AuthorizationError):
        service.approve(current_role=Role.GUARD, assignment_id="a1")


class UnchangedAttendance:
    """Reports no affected rows, as an UPDATE that rewrites identical values does."""

    def __init__(self, inner):
        self._inner = inner

    def __getattr__(self, name):
        return getattr(self._inner, name)

    def admin_update_times(self, **kwargs):
        self._inner.admin_update_times(**kwargs)
        return False


def test_saving_unchanged_times_succeeds(repos):
    service = TimesheetService(UnchangedAttendance(repos.attendance), repos.shifts, repos.directory)

    status = service.edit_entry(
        current_role=Role.ADMIN,
        assignment_id="a1",
        check_in_time="2025-12-01T09:07:00",
        check_out_time="2025-12-01T17:02:00",
    )

    assert status == AttendanceStatus.COMPLETED
