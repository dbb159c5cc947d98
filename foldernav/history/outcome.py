from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class FailureKind(str, Enum):
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    NO_HISTORY = "no_history"


@dataclass(frozen=True)
class Outcome:
    """
    Result of a Navigator operation.

    value:
        The new folder name for navigation, or the affected entry name.
    failure:
        None on success, otherwise the reason the operation was rejected.
    subject:
        The name the operation was about (target, entry or current folder),
        kept so callers can build a message on failure too.
    """

    value: Any = None
    failure: Optional[FailureKind] = None
    subject: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: Any, subject: Optional[str] = None) -> "Outcome":
        return cls(value=value, subject=subject if subject is not None else value)

    @classmethod
    def fail(cls, failure: FailureKind, subject: Optional[str] = None) -> "Outcome":
        return cls(failure=failure, subject=subject)
