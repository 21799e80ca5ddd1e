from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.memory_repository import InMemoryAttendanceRepository
from .attendance.metrics import AttendanceMetricsAggregator
from .attendance.service import AttendanceService
from .config import Settings, load_settings
from .leave.catalog import LeaveTypeCatalog
from .leave.ledger import LeaveQuotaLedger
from .leave.memory_repository import InMemoryLeaveApplicationRepository, InMemoryLeaveQuotaRepository
from .leave.service import LeaveService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.memory_repository import InMemoryPayrollRepository
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    settings: Settings

    attendance_repo: InMemoryAttendanceRepository
    leave_quota_repo: InMemoryLeaveQuotaRepository
    leave_application_repo: InMemoryLeaveApplicationRepository
    payroll_repo: InMemoryPayrollRepository

    leave_catalog: LeaveTypeCatalog
    attendance_aggregator: AttendanceMetricsAggregator
    leave_ledger: LeaveQuotaLedger

    attendance_service: AttendanceService
    leave_service: LeaveService
    payroll_service: PayrollService


def build_container(*, settings: Optional[Settings] = None) -> Container:
    settings = settings or load_settings()

    attendance_repo = InMemoryAttendanceRepository()
    leave_quota_repo = InMemoryLeaveQuotaRepository()
    leave_application_repo = InMemoryLeaveApplicationRepository()
    payroll_repo = InMemoryPayrollRepository()

    leave_catalog = LeaveTypeCatalog(default_color=settings.default_leave_color)
    attendance_aggregator = AttendanceMetricsAggregator(
        expected_working_days=settings.expected_working_days,
        late_cutoff=settings.late_cutoff,
    )
    leave_ledger = LeaveQuotaLedger(
        leave_quota_repo,
        leave_application_repo,
        catalog=leave_catalog,
        policy=settings.quota_policy,
    )

    attendance_service = AttendanceService(attendance_repo, aggregator=attendance_aggregator)
    leave_service = LeaveService(leave_quota_repo, leave_application_repo, leave_ledger)
    payroll_service = PayrollService(payroll_repo, calculator=StandardPayrollCalculator())

    return Container(
        settings=settings,
        attendance_repo=attendance_repo,
        leave_quota_repo=leave_quota_repo,
        leave_application_repo=leave_application_repo,
        payroll_repo=payroll_repo,
        leave_catalog=leave_catalog,
        attendance_aggregator=attendance_aggregator,
        leave_ledger=leave_ledger,
        attendance_service=attendance_service,
        leave_service=leave_service,
        payroll_service=payroll_service,
    )
