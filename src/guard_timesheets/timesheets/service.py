from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_iso, parse_timestamp
from ..core.constants import MONTH_DAYS, NOT_AVAILABLE, WEEK_DAYS
from ..core.enums import AttendanceStatus, DateRange, Role, TimesheetStatus, TimesheetView
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..directory.names import NameDirectory
from ..directory.repository import DirectoryRepository
from ..rules.classifier import StatusClassifier
from ..rules.engine import RuleEngine
from ..rules.hours import compute_actual_hours, compute_scheduled_hours
from ..shifts.model import ShiftSchedule
from ..shifts.repository import ShiftRepository
from .model import TimesheetEntry, TimesheetFilters, TimesheetStats

logger = logging.getLogger(__name__)

EXPORT_FIELDS = [
    "Date",
    "Guard",
    "Client",
    "Site",
    "Scheduled Start",
    "Scheduled End",
    "Scheduled Hours",
    "Check In",
    "Check Out",
    "Actual Hours",
    "Status",
    "Violations",
]


class TimesheetService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        shifts: ShiftRepository,
        directory: DirectoryRepository,
        *,
        engine: Optional[RuleEngine] = None,
        classifier: Optional[StatusClassifier] = None,
    ):
        self._attendance = attendance
        self._shifts = shifts
        self._directory = directory
        self._engine = engine or RuleEngine()
        self._classifier = classifier or StatusClassifier(self._engine.config)

    def _names(self) -> NameDirectory:
        return NameDirectory.build(
            guards=self._directory.list_guards(),
            sites=self._directory.list_sites(),
            clients=self._directory.list_clients(),
        )

    def build_entry(self, record: AttendanceRecord, shift: Optional[ShiftSchedule], names: NameDirectory) -> TimesheetEntry:
        shift = shift or ShiftSchedule(shift_id=record.shift_id, shift_date=None, start_time=None, end_time=None)
        actual = compute_actual_hours(record.check_in_time, record.check_out_time)
        if actual is None and record.is_completed:
            logger.warning("assignment %s checks out before it checks in", record.assignment_id)

        return TimesheetEntry(
            record=record,
            shift=shift,
            guard_name=names.guard_name(record.guard_id),
            client_name=names.client_name(shift.client_id),
            site_name=names.site_name(shift.site_id),
            status=self._classifier.classify(record, shift),
            scheduled_hours=compute_scheduled_hours(shift.start_time, shift.end_time),
            actual_hours=actual,
            violations=tuple(self._engine.detect_violations(record, shift)),
            disputed=self._classifier.is_disputed(record, shift),
        )

    def list_entries(self, filters: TimesheetFilters, *, today: date) -> list[TimesheetEntry]:
        names = self._names()
        shifts = {s.shift_id: s for s in self._shifts.list_all()}
        entries = [self.build_entry(r, shifts.get(r.shift_id), names) for r in self._attendance.list_all()]
        entries = [e for e in entries if _matches(e, filters, today)]
        # undated shifts sort last
        entries.sort(key=lambda e: e.shift.shift_date or date.min, reverse=True)
        return entries

    def stats(self, entries: Sequence[TimesheetEntry]) -> TimesheetStats:
        total_hours = 0.0
        overtime_hours = 0.0
        for e in entries:
            if e.actual_hours is None:
                continue
            total_hours += e.actual_hours
            if e.actual_hours > e.scheduled_hours:
                overtime_hours += e.actual_hours - e.scheduled_hours

        return TimesheetStats(
            total_entries=len(entries),
            completed=sum(1 for e in entries if e.record.is_completed),
            in_progress=sum(1 for e in entries if e.record.check_in_time and not e.record.check_out_time),
            pending=sum(1 for e in entries if e.record.check_in_time is None),
            total_hours=round(total_hours, 2),
            overtime_hours=round(overtime_hours, 2),
        )

    def export_rows(self, entries: Sequence[TimesheetEntry]) -> list[dict]:
        rows = []
        for e in entries:
            r = e.record
            rows.append(
                {
                    "Date": e.shift.shift_date.isoformat() if e.shift.shift_date else NOT_AVAILABLE,
                    "Guard": e.guard_name,
                    "Client": e.client_name,
                    "Site": e.site_name,
                    "Scheduled Start": e.shift.start_time or NOT_AVAILABLE,
                    "Scheduled End": e.shift.end_time or NOT_AVAILABLE,
                    "Scheduled Hours": f"{e.scheduled_hours:.2f}",
                    "Check In": format_iso(r.check_in_time) or NOT_AVAILABLE,
                    "Check Out": format_iso(r.check_out_time) or NOT_AVAILABLE,
                    "Actual Hours": f"{e.actual_hours:.2f}" if e.actual_hours is not None else NOT_AVAILABLE,
                    "Status": e.status.label,
                    "Violations": "; ".join(v.message for v in e.violations),
                }
            )
        return rows

    def edit_entry(
        self,
        *,
        current_role: Role,
        assignment_id: str,
        check_in_time: Optional[str],
        check_out_time: Optional[str],
    ) -> AttendanceStatus:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only administrators can edit time entries")

        if self._attendance.get_by_id(assignment_id) is None:
            raise NotFoundError("Time entry not found")

        check_in = _parse_edit_time(check_in_time, "check_in_time")
        check_out = _parse_edit_time(check_out_time, "check_out_time")
        if check_out is not None and check_in is None:
            raise ValidationError("Check-out requires a check-in", field_errors={"check_in_time": "required"})
        if check_in is not None and check_out is not None and compute_actual_hours(check_in, check_out) is None:
            raise ValidationError(
                "Check-out cannot be before check-in",
                field_errors={"check_out_time": "before check-in"},
            )

        if check_out is not None:
            status = AttendanceStatus.COMPLETED
        elif check_in is not None:
            status = AttendanceStatus.CHECKED_IN
        else:
            status = AttendanceStatus.ASSIGNED

        changed = self._attendance.admin_update_times(
            assignment_id=assignment_id,
            check_in_time=check_in,
            check_out_time=check_out,
            status=status,
        )
        if not changed:
            logger.debug("time entry %s already had these times", assignment_id)

        logger.info("time entry %s edited; status=%s", assignment_id, status.value)
        return status

    def approve(self, *, current_role: Role, assignment_id: str) -> None:
        self._decide(current_role=current_role, assignment_id=assignment_id, status=TimesheetStatus.APPROVED)

    def reject(self, *, current_role: Role, assignment_id: str) -> None:
        self._decide(current_role=current_role, assignment_id=assignment_id, status=TimesheetStatus.REJECTED)

    def _decide(self, *, current_role: Role, assignment_id: str, status: TimesheetStatus) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only administrators can review timesheets")

        record = self._attendance.get_by_id(assignment_id)
        if record is None:
            raise NotFoundError("Time entry not found")
        if record.timesheet_status != TimesheetStatus.PENDING:
            raise ValidationError("Timesheet has already been reviewed")

        if not self._attendance.set_timesheet_status(assignment_id=assignment_id, status=status):
            raise ValidationError("Timesheet review failed")
        logger.info("timesheet %s %s", assignment_id, status.value)


def _parse_edit_time(value: Optional[str], field_name: str) -> Optional[datetime]:
    text = (value or "").strip()
    if not text:
        return None
    parsed = parse_timestamp(text)
    if parsed is None:
        raise ValidationError(f"Invalid {field_name.replace('_', ' ')}", field_errors={field_name: "invalid"})
    return parsed


def _in_range(shift_date: Optional[date], date_range: DateRange, today: date) -> bool:
    if date_range == DateRange.ALL:
        return True
    if shift_date is None:
        return False
    if date_range == DateRange.TODAY:
        return shift_date == today
    days = WEEK_DAYS if date_range == DateRange.WEEK else MONTH_DAYS
    return shift_date >= today - timedelta(days=days)


def _matches(entry: TimesheetEntry, filters: TimesheetFilters, today: date) -> bool:
    record = entry.record
    if not _in_range(entry.shift.shift_date, filters.date_range, today):
        return False
    if filters.guard_id and record.guard_id != filters.guard_id:
        return False
    if filters.client_id and entry.shift.client_id != filters.client_id:
        return False

    if filters.view == TimesheetView.PENDING and record.is_completed:
        return False
    if filters.view == TimesheetView.APPROVED and record.status != AttendanceStatus.COMPLETED:
        return False
    if filters.view == TimesheetView.DISPUTED and not entry.disputed:
        return False

    term = filters.search.strip().lower()
    if term:
        haystack = (entry.guard_name, entry.client_name, entry.site_name)
        if not any(term in name.lower() for name in haystack):
            return False
    return True
