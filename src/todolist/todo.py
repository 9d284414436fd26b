"""Todo data model for the todolist application."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from .utils.datetime import current_timestamp, date_of, format_date


# On-disk field name -> expected JSON type
TODO_FIELDS = {
    "id": int,
    "timestamp": int,
    "date": str,
    "text": str,
    "completed": bool,
}


@dataclass
class Todo:
    """A single task with its completion flag and creation time."""

    id: int
    created_at: int
    created_date: str
    text: str
    completed: bool = False

    @classmethod
    def create(cls, todo_id: int, text: str, now: Optional[datetime] = None) -> "Todo":
        """Build a new, pending todo stamped with the current time."""
        timestamp = current_timestamp(now)
        return cls(
            id=todo_id,
            created_at=timestamp,
            created_date=format_date(date_of(timestamp)),
            text=text,
            completed=False,
        )

    def set_completed(self, status: bool):
        """Set the completion flag."""
        self.completed = status

    def toggle(self):
        """Flip the completion flag."""
        self.completed = not self.completed

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Todo to its on-disk dictionary form."""
        return {
            "id": self.id,
            "timestamp": self.created_at,
            "date": self.created_date,
            "text": self.text,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Todo":
        """Create a Todo from its on-disk dictionary form.

        Only field presence and JSON types are checked; values are otherwise
        accepted as-is.

        Raises:
            ValueError: If a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise ValueError(f"todo entry must be an object, got {type(data).__name__}")

        for name, expected in TODO_FIELDS.items():
            if name not in data:
                raise ValueError(f"missing field '{name}'")
            value = data[name]
            # bool is a subclass of int, so integers need an explicit check
            if expected is int and isinstance(value, bool):
                raise ValueError(f"field '{name}' must be an integer")
            if not isinstance(value, expected):
                raise ValueError(
                    f"field '{name}' must be {expected.__name__}, got {type(value).__name__}"
                )

        return cls(
            id=data["id"],
            created_at=data["timestamp"],
            created_date=data["date"],
            text=data["text"],
            completed=data["completed"],
        )
