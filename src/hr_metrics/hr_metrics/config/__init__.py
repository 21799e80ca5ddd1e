from __future__ import annotations

import importlib
import os
from dataclasses import dataclass
from datetime import time
from typing import Optional

from dotenv import load_dotenv

from ..common.datetime_utils import parse_clock
from ..core.enums import QuotaReservationPolicy


def get_settings_module() -> str:
    # APP_ENV selects the settings module, development by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "hr_metrics.config.production"

    if env in {"test", "testing"}:
        return "hr_metrics.config.testing"

    return "hr_metrics.config.development"


@dataclass(frozen=True)
class Settings:
    expected_working_days: int
    late_cutoff: time
    quota_policy: QuotaReservationPolicy
    default_leave_color: str
    debug: bool = False


def load_settings(settings_module: Optional[str] = None) -> Settings:
    load_dotenv(override=False)
    module = importlib.import_module(settings_module or get_settings_module())
    # reload so env changes since the first import are picked up
    module = importlib.reload(module)

    expected_working_days = int(getattr(module, "EXPECTED_WORKING_DAYS"))
    if expected_working_days < 0:
        raise ValueError("EXPECTED_WORKING_DAYS must not be negative")

    return Settings(
        expected_working_days=expected_working_days,
        late_cutoff=parse_clock(getattr(module, "LATE_CUTOFF")),
        quota_policy=QuotaReservationPolicy(getattr(module, "QUOTA_POLICY")),
        default_leave_color=str(getattr(module, "DEFAULT_LEAVE_COLOR")),
        debug=bool(getattr(module, "DEBUG", False)),
    )
