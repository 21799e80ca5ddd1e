from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.constants import DEFAULT_LEAVE_COLOR, UNKNOWN_LEAVE_NAME
from .model import LeaveTypeMetadata

logger = logging.getLogger("hr_metrics.leave.catalog")

DEFAULT_LEAVE_TYPES = (
    LeaveTypeMetadata(id=1, name="Paid Leave", color_code="#3B82F6", is_annual=True),
    LeaveTypeMetadata(id=2, name="Sick Leave", color_code="#10B981"),
    LeaveTypeMetadata(id=3, name="Casual Leave", color_code="#F59E0B"),
)


class LeaveTypeCatalog:
    """Static leave type reference data with placeholder fallbacks."""

    def __init__(
        self,
        leave_types: Iterable[LeaveTypeMetadata] = DEFAULT_LEAVE_TYPES,
        *,
        default_color: str = DEFAULT_LEAVE_COLOR,
    ):
        self._types = {t.id: t for t in leave_types}
        self._default_color = default_color

    def get(self, leave_type_id: int) -> Optional[LeaveTypeMetadata]:
        return self._types.get(leave_type_id)

    def resolve_name(self, leave_type_id: int) -> str:
        leave_type = self.get(leave_type_id)
        if leave_type is None:
            logger.warning("unknown leave type id=%s, using placeholder", leave_type_id)
            return UNKNOWN_LEAVE_NAME
        return leave_type.name

    def resolve_color(self, leave_type_id: int) -> str:
        leave_type = self.get(leave_type_id)
        if leave_type is None or not leave_type.color_code:
            return self._default_color
        return leave_type.color_code
