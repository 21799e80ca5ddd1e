"""Example: drive the services directly, wired through the container."""

import logging
from datetime import date, datetime

from hr_metrics.container import build_container
from hr_metrics.core.enums import Role


def main():
    logging.basicConfig(level=logging.INFO)
    container = build_container()

    container.attendance_service.check_in(1, now=datetime(2025, 3, 3, 9, 45))
    container.attendance_service.check_out(1, now=datetime(2025, 3, 3, 17, 45))
    print(container.attendance_service.monthly_metrics(1, year=2025, month=3))

    container.leave_service.grant_quota(user_id=1, leave_type_id=1, total_quota=12)
    app = container.leave_service.apply(
        user_id=1,
        leave_type_id=1,
        start_date=date(2025, 3, 10),
        end_date=date(2025, 3, 14),
        reason="Family trip",
    )
    container.leave_service.approve(current_role=Role.HR, admin_user_id=99, application_id=app.id)
    print(container.leave_ledger.balances_for_user(1))

    payroll = container.payroll_service.generate(user_id=1, month=3, year=2025, base_salary="50000", deductions="2000", bonus="1000")
    print(payroll.net_salary)


if __name__ == "__main__":
    main()
