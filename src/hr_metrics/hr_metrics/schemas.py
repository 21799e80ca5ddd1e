"""Boundary schemas.

Raw payloads (API responses, fixtures, imported rows) are validated here and
converted to the frozen domain dataclasses before they reach the calculators.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .attendance.model import AttendanceRecord
from .common.datetime_utils import inclusive_day_span
from .core.constants import DEFAULT_LEAVE_COLOR
from .core.enums import AttendanceStatus, LeaveStatus, PaymentStatus
from .leave.model import LeaveApplication, LeaveQuota, LeaveTypeMetadata
from .payroll.model import PayrollRecord


class AttendanceRecordIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(ge=1)
    user_id: int = Field(alias="userId", ge=1)
    work_date: date = Field(alias="date")
    check_in_time: Optional[datetime] = Field(default=None, alias="checkInTime")
    check_out_time: Optional[datetime] = Field(default=None, alias="checkOutTime")
    status: AttendanceStatus
    working_hours: Optional[str] = Field(default=None, alias="workingHours")
    regularization_reason: Optional[str] = Field(default=None, alias="notes")

    @model_validator(mode="after")
    def _validate_times(self) -> "AttendanceRecordIn":
        if self.check_in_time and self.check_out_time and self.check_out_time < self.check_in_time:
            raise ValueError("checkOutTime cannot be earlier than checkInTime")
        return self

    def to_domain(self) -> AttendanceRecord:
        return AttendanceRecord(
            attendance_id=self.id,
            user_id=self.user_id,
            work_date=self.work_date,
            status=self.status,
            check_in_time=self.check_in_time,
            check_out_time=self.check_out_time,
            working_hours=self.working_hours,
            regularization_reason=self.regularization_reason,
        )


class LeaveTypeIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(ge=1)
    name: str = Field(min_length=1)
    color_code: str = Field(default=DEFAULT_LEAVE_COLOR, alias="colorCode", pattern=r"^#[0-9A-Fa-f]{6}$")
    is_annual: bool = Field(default=False, alias="isAnnual")

    def to_domain(self) -> LeaveTypeMetadata:
        return LeaveTypeMetadata(id=self.id, name=self.name, color_code=self.color_code, is_annual=self.is_annual)


class LeaveQuotaIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(ge=1)
    user_id: int = Field(alias="userId", ge=1)
    leave_type_id: int = Field(alias="leaveTypeId", ge=1)
    total_quota: int = Field(alias="totalQuota", ge=0)

    def to_domain(self) -> LeaveQuota:
        return LeaveQuota(
            id=self.id,
            user_id=self.user_id,
            leave_type_id=self.leave_type_id,
            total_quota=self.total_quota,
        )


class LeaveApplicationIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(ge=1)
    user_id: int = Field(alias="userId", ge=1)
    leave_type_id: int = Field(alias="leaveTypeId", ge=1)
    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")
    total_days: int = Field(alias="totalDays", gt=0)
    reason: str = Field(min_length=1)
    status: LeaveStatus = LeaveStatus.PENDING
    applied_at: datetime = Field(alias="appliedAt")

    @model_validator(mode="after")
    def _validate_span(self) -> "LeaveApplicationIn":
        if self.end_date < self.start_date:
            raise ValueError("endDate cannot be before startDate")
        span = inclusive_day_span(self.start_date, self.end_date)
        if self.total_days != span:
            raise ValueError(f"totalDays must be {span} for the given dates")
        return self

    def to_domain(self) -> LeaveApplication:
        return LeaveApplication(
            id=self.id,
            user_id=self.user_id,
            leave_type_id=self.leave_type_id,
            start_date=self.start_date,
            end_date=self.end_date,
            total_days=self.total_days,
            reason=self.reason,
            status=self.status,
            applied_at=self.applied_at,
        )


class PayrollRecordIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(ge=1)
    user_id: int = Field(alias="userId", ge=1)
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1900)
    base_salary: int = Field(alias="baseSalary", ge=0)
    deductions: int = Field(default=0, ge=0)
    bonus: int = Field(default=0, ge=0)
    payment_status: PaymentStatus = Field(default=PaymentStatus.PENDING, alias="paymentStatus")
    generated_at: datetime = Field(alias="generatedAt")

    @property
    def net_salary(self) -> int:
        return self.base_salary - self.deductions + self.bonus

    def to_domain(self) -> PayrollRecord:
        return PayrollRecord(
            payroll_id=self.id,
            user_id=self.user_id,
            month=self.month,
            year=self.year,
            base_salary=self.base_salary,
            deductions=self.deductions,
            bonus=self.bonus,
            net_salary=self.net_salary,
            payment_status=self.payment_status,
            generated_at=self.generated_at,
        )
