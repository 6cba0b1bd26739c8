"""
Outcome of a best-effort remote call.

Lookups and job-record posts return a CallOutcome instead of raising, so
callers decide explicitly whether a failure is ignored or fatal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class CallStatus(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CallOutcome:
    status: CallStatus
    value: Any = None
    error: Optional[Exception] = None

    @classmethod
    def success(cls, value: Any = None) -> "CallOutcome":
        return cls(CallStatus.SUCCESS, value=value)

    @classmethod
    def not_found(cls, error: Optional[Exception] = None) -> "CallOutcome":
        return cls(CallStatus.NOT_FOUND, error=error)

    @classmethod
    def failed(cls, error: Exception) -> "CallOutcome":
        return cls(CallStatus.ERROR, error=error)

    @property
    def ok(self) -> bool:
        return self.status == CallStatus.SUCCESS

    @property
    def message(self) -> str:
        """Human-readable reason for a non-successful outcome."""
        if self.error is None:
            return str(self.status)
        reason = getattr(self.error, "reason", None)
        return str(reason) if reason else str(self.error)
