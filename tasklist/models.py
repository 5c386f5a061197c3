from dataclasses import dataclass
from enum import Enum


class TaskStatus(str, Enum):
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"

    @property
    def token(self) -> str:
        return STATUS_TOKENS[self]

    @classmethod
    def from_token(cls, token: str) -> "TaskStatus":
        """Map a file token ("Complete"/"Incomplete") back to a status."""
        try:
            return TOKEN_STATUSES[token]
        except KeyError:
            raise ValueError(f"Unknown status token '{token}'") from None


# Tokens as written in the backing file. Kept apart from enum values so the
# file format does not drift if the enum is renamed.
STATUS_TOKENS: dict[TaskStatus, str] = {
    TaskStatus.COMPLETE: "Complete",
    TaskStatus.INCOMPLETE: "Incomplete",
}
TOKEN_STATUSES: dict[str, TaskStatus] = {token: status for status, token in STATUS_TOKENS.items()}


@dataclass
class Task:
    id: int
    status: TaskStatus
    description: str

    @property
    def done(self) -> bool:
        return self.status is TaskStatus.COMPLETE

    def to_dict(self) -> dict:
        return {"id": self.id, "status": self.status.value, "description": self.description}
