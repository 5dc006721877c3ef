"""
Check outcomes and exit codes.
"""
from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    """Monitoring plugin states, valued by their process exit code."""
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


@dataclass(frozen=True)
class CheckResult:
    """Terminal result of a single check run."""

    outcome: Outcome
    message: str

    @property
    def exit_code(self) -> int:
        return self.outcome.value

    @classmethod
    def ok(cls, message: str) -> 'CheckResult':
        return cls(Outcome.OK, message)

    @classmethod
    def critical(cls, message: str) -> 'CheckResult':
        return cls(Outcome.CRITICAL, message)

    @classmethod
    def unknown(cls, message: str) -> 'CheckResult':
        return cls(Outcome.UNKNOWN, message)
