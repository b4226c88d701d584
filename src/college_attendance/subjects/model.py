from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Subject:
    """Domain entity: a subject taught to one class."""

    id: int
    class_name: str
    subject_name: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "className": self.class_name, "subjectName": self.subject_name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Subject":
        return cls(
            id=int(data["id"]),
            class_name=str(data.get("className", "")),
            subject_name=str(data.get("subjectName", "")),
        )
