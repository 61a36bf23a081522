from __future__ import annotations

from dataclasses import asdict
from datetime import timedelta

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_optional_date
from ..common.http import json_api
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_report")
    @json_api
    def payroll_report():
        today = now_local().date()
        start = parse_optional_date(request.args.get("start")) or today - timedelta(days=14)
        end = parse_optional_date(request.args.get("end")) or today
        if end < start:
            raise ValidationError("End date must not be before start date", field_errors={"end": "before start"})

        report = container.payroll_service.build_payroll(start=start, end=end)
        return jsonify(
            {
                "success": True,
                "start": start.isoformat(),
                "end": end.isoformat(),
                "lines": [x.to_dict() for x in report.lines],
                "totals": {k: float(v) for k, v in asdict(report.totals).items()},
            }
        )
