# models/message.py

from dataclasses import dataclass
from models.enums import Role


@dataclass(frozen=True)
class Message:
    """Chat message exchanged with the assistant. Never persisted."""
    role: Role
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role.value, "content": self.content}

    @classmethod
    def from_dict(cls, data: dict) -> "Message":
        return cls(role=Role(data["role"]), content=data["content"])
