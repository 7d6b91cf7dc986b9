from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..access.policy import AccessPolicy, Caller
from ..common.datetime_utils import today_iso
from ..common.validators import require_choice, require_iso_date, require_non_empty
from ..core.enums import LeaveStatus
from ..core.exceptions import NotFound, ValidationError
from .model import LeaveDecision, LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)

DECISION_STATUSES = (LeaveStatus.APPROVED, LeaveStatus.REJECTED)


class LeaveService:
    def __init__(self, leaves: LeaveRepository, policy: Optional[AccessPolicy] = None):
        self._leaves = leaves
        self._policy = policy or AccessPolicy()

    def list_for(self, caller: Caller) -> Sequence[LeaveRequest]:
        caller = self._policy.require_authenticated(caller)
        if caller.is_admin:
            return self._leaves.list_all()
        return self._leaves.list_by_employee(caller.employee_id)

    def apply(
        self,
        caller: Caller,
        *,
        start_date: str,
        end_date: str,
        reason: str,
        now: Optional[datetime] = None,
    ) -> LeaveRequest:
        """Submit a leave request for the caller; it starts out Pending."""
        caller = self._policy.require_authenticated(caller)

        start_date = require_iso_date(start_date, "Start date")
        end_date = require_iso_date(end_date, "End date")
        reason = require_non_empty(reason, "Reason")
        if end_date < start_date:
            raise ValidationError("End date must be on or after start date")

        leave = self._leaves.create_leave(
            employee_id=caller.employee_id,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            applied_date=today_iso(now),
        )
        logger.info("Leave request %s submitted by %s", leave.id, caller.employee_id)
        return leave

    def decide(self, caller: Caller, request_id: str, status: str) -> LeaveRequest:
        self._policy.require_admin(caller)

        status_value = require_choice(
            status, LeaveStatus, "status", allowed=DECISION_STATUSES, message="Invalid status"
        )

        updated = self._leaves.decide(LeaveDecision(request_id=request_id, status=status_value))
        if not updated:
            raise NotFound("Leave request not found")

        logger.info("Leave request %s %s by %s", request_id, status_value.value.lower(), caller.employee_id)
        return updated
