from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

import pytest

from guard_timesheets.attendance.model import AttendanceRecord
from guard_timesheets.core.enums import AttendanceStatus, TimesheetStatus
from guard_timesheets.directory.model import Client, Guard, Site
from guard_timesheets.shifts.model import ShiftSchedule


class InMemoryShifts:
    def __init__(self, shifts=()):
        self._shifts = {s.shift_id: s for s in shifts}

    def list_all(self):
        return list(self._shifts.values())

    def get_by_id(self, shift_id: str) -> Optional[ShiftSchedule]:
        return self._shifts.get(shift_id)

    def list_for_client(self, client_id: str, *, shift_date: Optional[date] = None):
        return [
            s
            for s in self._shifts.values()
            if s.client_id == client_id and (shift_date is None or s.shift_date == shift_date)
        ]


class InMemoryAttendance:
    def __init__(self, records=()):
        self._records = {r.assignment_id: r for r in records}
        self.updated = None

    def list_all(self):
        return list(self._records.values())

    def get_by_id(self, assignment_id: str) -> Optional[AttendanceRecord]:
        return self._records.get(assignment_id)

    def list_for_shifts(self, shift_ids):
        wanted = set(shift_ids)
        return [r for r in self._records.values() if r.shift_id in wanted]

    def admin_update_times(self, *, assignment_id, check_in_time, check_out_time, status: AttendanceStatus) -> bool:
        rec = self._records.get(assignment_id)
        if not rec:
            return False
        self._records[assignment_id] = replace(
            rec, check_in_time=check_in_time, check_out_time=check_out_time, status=status
        )
        self.updated = {
            "assignment_id": assignment_id,
            "check_in_time": check_in_time,
            "check_out_time": check_out_time,
            "status": status,
        }
        return True

    def set_timesheet_status(self, *, assignment_id: str, status: TimesheetStatus) -> bool:
        rec = self._records.get(assignment_id)
        if not rec:
            return False
        self._records[assignment_id] = replace(rec, timesheet_status=status)
        return True


class InMemoryDirectory:
    def __init__(self, guards=(), sites=(), clients=()):
        self._guards = list(guards)
        self._sites = list(sites)
        self._clients = list(clients)

    def list_guards(self):
        return list(self._guards)

    def list_sites(self):
        return list(self._sites)

    def list_clients(self):
        return list(self._clients)


@dataclass
class Repos:
    shifts: InMemoryShifts
    attendance: InMemoryAttendance
    directory: InMemoryDirectory


GUARDS = [
    Guard(guard_id="g1", first_name="Jane", last_name="Doe"),
    Guard(guard_id="g2", first_name="Sam", last_name="Patel"),
]
SITES = [Site(site_id="s1", site_name="Canary Wharf"), Site(site_id="s2", site_name="Docklands Depot")]
CLIENTS = [Client(client_id="c1", company_name="Acme Holdings"), Client(client_id="c2", company_name="Borough Retail")]


@pytest.fixture
def make_repos():
    def _make(*, shifts=(), records=(), guards=GUARDS, sites=SITES, clients=CLIENTS) -> Repos:
        return Repos(
            shifts=InMemoryShifts(shifts),
            attendance=InMemoryAttendance(records),
            directory=InMemoryDirectory(guards, sites, clients),
        )

    return _make
