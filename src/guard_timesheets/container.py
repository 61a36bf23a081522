from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .billing.config import BillingConfig
from .billing.service import InvoiceService
from .database.connection import DBConfig, DatabaseConnection
from .directory.mysql_directory_repository import MySQLDirectoryRepository
from .payroll.service import PayrollService
from .rules.config import RuleConfig
from .rules.engine import RuleEngine
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .timesheets.service import TimesheetService


@dataclass(frozen=True)
class Container:
    rule_config: RuleConfig
    billing_config: BillingConfig

    timesheet_service: TimesheetService
    invoice_service: InvoiceService
    payroll_service: PayrollService


def build_services(
    *,
    shifts_repo,
    attendance_repo,
    directory_repo,
    rule_config: RuleConfig,
    billing_config: BillingConfig,
) -> Container:
    engine = RuleEngine(rule_config)
    return Container(
        rule_config=rule_config,
        billing_config=billing_config,
        timesheet_service=TimesheetService(attendance_repo, shifts_repo, directory_repo, engine=engine),
        invoice_service=InvoiceService(shifts_repo, attendance_repo, directory_repo, config=billing_config),
        payroll_service=PayrollService(attendance_repo, shifts_repo, directory_repo, config=billing_config),
    )


def build_container(*, db_config: dict, rule_config: RuleConfig, billing_config: BillingConfig) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return build_services(
        shifts_repo=MySQLShiftRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        directory_repo=MySQLDirectoryRepository(conn),
        rule_config=rule_config,
        billing_config=billing_config,
    )
