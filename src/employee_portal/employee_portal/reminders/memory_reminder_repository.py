from __future__ import annotations

import threading
import uuid
from typing import Optional, Sequence

from ..core.enums import Priority
from .model import Reminder
from .repository import ReminderRepository


class InMemoryReminderRepository(ReminderRepository):
    def __init__(self):
        self._lock = threading.Lock()
        self._by_id: dict[str, Reminder] = {}

    def get_by_id(self, reminder_id: str) -> Optional[Reminder]:
        return self._by_id.get(reminder_id)

    def list_all(self) -> Sequence[Reminder]:
        # newest first, same as the MySQL listing
        return list(reversed(list(self._by_id.values())))

    def create_reminder(
        self,
        *,
        title: str,
        description: str,
        reminder_date: str,
        importance: Priority,
        created_at: str,
    ) -> Reminder:
        reminder = Reminder(
            id=str(uuid.uuid4()),
            title=title,
            description=description,
            reminder_date=reminder_date,
            importance=importance,
            created_at=created_at,
        )
        with self._lock:
            self._by_id[reminder.id] = reminder
        return reminder

    def delete_by_id(self, reminder_id: str) -> bool:
        with self._lock:
            return self._by_id.pop(reminder_id, None) is not None
