# models/task.py

from dataclasses import dataclass


@dataclass(frozen=True)
class Task:
    """To-do item (persisted under the `todos` slot)"""
    id: str
    text: str
    completed: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        return cls(
            id=str(data["id"]),
            text=data["text"],
            completed=bool(data.get("completed", False))
        )


@dataclass(frozen=True)
class Routine(Task):
    """Daily routine item; same shape as a task"""
    pass
