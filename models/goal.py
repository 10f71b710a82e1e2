# models/goal.py

from dataclasses import dataclass
from models.enums import GoalType


@dataclass(frozen=True)
class Goal:
    id: str
    text: str
    type: GoalType = GoalType.SHORT_TERM
    reached: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "type": self.type.value,
            "reached": self.reached
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Goal":
        return cls(
            id=str(data["id"]),
            text=data["text"],
            type=GoalType(data.get("type", GoalType.SHORT_TERM.value)),
            reached=bool(data.get("reached", False))
        )
