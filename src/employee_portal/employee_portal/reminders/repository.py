from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Priority
from .model import Reminder


class ReminderRepository(Protocol):
    def get_by_id(self, reminder_id: str) -> Optional[Reminder]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Reminder]:
        raise NotImplementedError

    def create_reminder(
        self,
        *,
        title: str,
        description: str,
        reminder_date: str,
        importance: Priority,
        created_at: str,
    ) -> Reminder:
        raise NotImplementedError

    def delete_by_id(self, reminder_id: str) -> bool:
        raise NotImplementedError
