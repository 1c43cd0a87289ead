"""Tagged result for reads of a configuration word."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ReadStatus(Enum):
    SUCCESS = auto()
    NOT_FOUND = auto()  # Benign: value cleared or never set
    UNAVAILABLE = auto()  # Capability missing on this platform
    ERROR = auto()  # The read mechanism itself failed


@dataclass(frozen=True)
class ReadOutcome:
    """Outcome of reading a 32-bit configuration word.

    Attributes:
        status: Which of the four outcomes occurred
        word: The configuration word, only set for SUCCESS
        detail: Human-readable description for logs
    """

    status: ReadStatus
    word: int | None = None
    detail: str = ""

    @classmethod
    def success(cls, word: int) -> ReadOutcome:
        return cls(ReadStatus.SUCCESS, word=word, detail="ok")

    @classmethod
    def not_found(cls, detail: str) -> ReadOutcome:
        return cls(ReadStatus.NOT_FOUND, detail=detail)

    @classmethod
    def unavailable(cls, detail: str) -> ReadOutcome:
        return cls(ReadStatus.UNAVAILABLE, detail=detail)

    @classmethod
    def error(cls, detail: str) -> ReadOutcome:
        return cls(ReadStatus.ERROR, detail=detail)

    @property
    def ok(self) -> bool:
        return self.status is ReadStatus.SUCCESS
