from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..access.policy import AccessPolicy, Caller
from ..common.datetime_utils import now_utc, to_iso_timestamp
from ..common.validators import require_choice, require_iso_date, require_non_empty
from ..core.enums import Priority
from ..core.exceptions import NotFound
from .model import Reminder
from .repository import ReminderRepository


class ReminderService:
    def __init__(self, reminders: ReminderRepository, policy: Optional[AccessPolicy] = None):
        self._reminders = reminders
        self._policy = policy or AccessPolicy()

    def list_all(self, caller: Caller) -> Sequence[Reminder]:
        self._policy.require_authenticated(caller)
        return self._reminders.list_all()

    def create(
        self,
        caller: Caller,
        *,
        title: str,
        description: str,
        reminder_date: str,
        importance: str,
        now: Optional[datetime] = None,
    ) -> Reminder:
        self._policy.require_admin(caller)
        return self._reminders.create_reminder(
            title=require_non_empty(title, "Title"),
            description=require_non_empty(description, "Description"),
            reminder_date=require_iso_date(reminder_date, "Reminder date"),
            importance=require_choice(importance, Priority, "importance"),
            created_at=to_iso_timestamp(now or now_utc()),
        )

    def delete(self, caller: Caller, reminder_id: str) -> None:
        self._policy.require_admin(caller)
        if not self._reminders.delete_by_id(reminder_id):
            raise NotFound("Reminder not found")
