from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Priority


@dataclass(frozen=True)
class Reminder:
    """A note an administrator broadcasts to every employee."""

    id: str
    title: str
    description: str
    reminder_date: str
    importance: Priority
    created_at: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "reminderDate": self.reminder_date,
            "importance": self.importance.value,
            "createdAt": self.created_at,
        }
