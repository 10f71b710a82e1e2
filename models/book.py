# models/book.py

from dataclasses import dataclass
from models.enums import BookStatus


@dataclass(frozen=True)
class Book:
    id: str
    title: str
    author: str
    status: BookStatus = BookStatus.READING

    @property
    def is_reading(self) -> bool:
        return self.status == BookStatus.READING

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "status": self.status.value
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Book":
        return cls(
            id=str(data["id"]),
            title=data["title"],
            author=data.get("author", ""),
            status=BookStatus(data.get("status", BookStatus.READING.value))
        )
