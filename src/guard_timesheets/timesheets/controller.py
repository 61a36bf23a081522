from __future__ import annotations

import csv
import io
from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso, now_local
from ..common.http import current_role, json_api
from ..core.enums import DateRange, TimesheetView
from ..core.exceptions import ValidationError
from ..container import Container
from .model import TimesheetEntry, TimesheetFilters
from .service import EXPORT_FIELDS


def _to_json(e: TimesheetEntry) -> dict:
    r = e.record
    return {
        "assignment_id": r.assignment_id,
        "shift_id": r.shift_id,
        "guard_id": r.guard_id,
        "guard": e.guard_name,
        "client": e.client_name,
        "site": e.site_name,
        "date": e.shift.shift_date.isoformat() if e.shift.shift_date else None,
        "start_time": e.shift.start_time,
        "end_time": e.shift.end_time,
        "check_in_time": format_iso(r.check_in_time),
        "check_out_time": format_iso(r.check_out_time),
        "break_minutes": r.break_minutes,
        "scheduled_hours": round(e.scheduled_hours, 2),
        "actual_hours": round(e.actual_hours, 2) if e.actual_hours is not None else None,
        "status": e.status.value,
        "status_label": e.status.label,
        "violations": [v.message for v in e.violations],
        "disputed": e.disputed,
        "timesheet_status": r.timesheet_status.value,
    }


def _filters_from_args() -> TimesheetFilters:
    try:
        return TimesheetFilters(
            date_range=DateRange(request.args.get("range") or DateRange.WEEK.value),
            guard_id=request.args.get("guard_id") or None,
            client_id=request.args.get("client_id") or None,
            view=TimesheetView(request.args.get("view") or TimesheetView.ALL.value),
            search=request.args.get("search") or "",
        )
    except ValueError as e:
        raise ValidationError(str(e))


def register(app: Flask, container: Container) -> None:
    service = container.timesheet_service

    @app.route("/api/timesheets", methods=["GET"], endpoint="timesheets_list")
    @json_api
    def timesheets_list():
        entries = service.list_entries(_filters_from_args(), today=now_local().date())
        return jsonify({"success": True, "entries": [_to_json(e) for e in entries]})

    @app.route("/api/timesheets/stats", methods=["GET"], endpoint="timesheets_stats")
    @json_api
    def timesheets_stats():
        stats = service.stats(service.list_entries(_filters_from_args(), today=now_local().date()))
        return jsonify({"success": True, "stats": asdict(stats)})

    @app.route("/api/timesheets/export.csv", methods=["GET"], endpoint="timesheets_export")
    @json_api
    def timesheets_export():
        today = now_local().date()
        rows = service.export_rows(service.list_entries(_filters_from_args(), today=today))

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=EXPORT_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=time-tracking-{today.isoformat()}.csv"},
        )

    @app.route("/api/timesheets/<assignment_id>/edit", methods=["POST"], endpoint="timesheets_edit")
    @json_api
    def timesheets_edit(assignment_id: str):
        data = request.get_json(silent=True) or {}
        status = service.edit_entry(
            current_role=current_role(),
            assignment_id=assignment_id,
            check_in_time=data.get("check_in_time"),
            check_out_time=data.get("check_out_time"),
        )
        return jsonify({"success": True, "status": status.value})

    @app.route("/api/timesheets/<assignment_id>/approve", methods=["POST"], endpoint="timesheets_approve")
    @json_api
    def timesheets_approve(assignment_id: str):
        service.approve(current_role=current_role(), assignment_id=assignment_id)
        return jsonify({"success": True})

    @app.route("/api/timesheets/<assignment_id>/reject", methods=["POST"], endpoint="timesheets_reject")
    @json_api
    def timesheets_reject(assignment_id: str):
        service.reject(current_role=current_role(), assignment_id=assignment_id)
        return jsonify({"success": True})
