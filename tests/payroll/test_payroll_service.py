from datetime import date, datetime
from decimal import Decimal

from guard_timesheets.attendance.model import AttendanceRecord
from guard_timesheets.directory.model import Guard
from guard_timesheets.payroll.service import PayrollService
from guard_timesheets.shifts.model import ShiftSchedule

GUARDS = [
    Guard(guard_id="g1", first_name="Jane", last_name="Doe", hourly_rate=Decimal("15")),
    Guard(guard_id="g2", first_name="Sam", last_name="Patel"),
]


def _shift(shift_id, day):
    return ShiftSchedule(shift_id=shift_id, shift_date=day, start_time="09:00", end_time="17:00", site_id="s1")


def _record(assignment_id, shift_id, guard_id, day, start_hour, end_hour):
    return AttendanceRecord(
        assignment_id=assignment_id,
        shift_id=shift_id,
        guard_id=guard_id,
        check_in_time=datetime(day.year, day.month, day.day, start_hour),
        check_out_time=datetime(day.year, day.month, day.day, end_hour),
    )


def _service(make_repos):
    d1, d2, outside = date(2025, 12, 1), date(2025, 12, 2), date(2025, 11, 1)
    repos = make_repos(
        guards=GUARDS,
        shifts=[_shift("sh1", d1), _shift("sh2", d2), _shift("sh3", outside)],
        records=[
            _record("a1", "sh1", "g1", d1, 9, 18),
            _record("a2", "sh2", "g1", d2, 9, 17),
            _record("a3", "sh1", "g2", d1, 9, 16),
            _record("a4", "sh3", "g2", outside, 9, 17),
            _record("a5", "sh2", "g2", d2, 17, 9),
            AttendanceRecord(assignment_id="a6", shift_id="sh2", guard_id="g2", check_in_time=datetime(2025, 12, 2, 9)),
        ],
    )
    return PayrollService(repos.attendance, repos.shifts, repos.directory)


def test_payroll_lines_per_guard(make_repos):
    report = _service(make_repos).build_payroll(start=date(2025, 12, 1), end=date(2025, 12, 14))

    jane, sam = report.lines
    assert (jane.name, sam.name) == ("Jane Doe", "Sam Patel")

    assert jane.regular_hours == Decimal("16.00")
    assert jane.overtime_hours == Decimal("1.00")
    assert jane.overtime_rate == Decimal("22.50")
    assert jane.pay.gross_pay == Decimal("262.50")
    assert jane.pay.net_pay == Decimal("178.50")

    assert sam.hourly_rate == Decimal("12.5")
    assert sam.regular_hours == Decimal("7.00")
    assert sam.overtime_hours == Decimal("0.00")
    assert sam.pay.gross_pay == Decimal("87.50")


def test_payroll_totals(make_repos):
    totals = _service(make_repos).build_payroll(start=date(2025, 12, 1), end=date(2025, 12, 14)).totals

    assert totals.total_gross == Decimal("350.00")
    assert totals.total_tax == Decimal("70.00")
    assert totals.total_ni == Decimal("42.00")
    assert totals.total_net == Decimal("238.00")
    assert totals.total_hours == Decimal("24.00")


def test_period_without_work_is_empty(make_repos):
    report = _service(make_repos).build_payroll(start=date(2026, 1, 1), end=date(2026, 1, 31))

    assert report.lines == []
    assert report.totals.total_gross == Decimal("0")


def test_line_serialises_as_floats(make_repos):
    line = _service(make_repos).build_payroll(start=date(2025, 12, 1), end=date(2025, 12, 1)).lines[0]

    data = line.to_dict()
    assert data["name"] == "Jane Doe"
    assert data["overtime_hours"] == 1.0
    assert data["gross_pay"] == 142.5
