from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class Outcome(str, Enum):
    OK = "ok"
    EMPTY = "empty"  # collaborator answered, nothing there
    SKIPPED = "skipped"  # collaborator not configured
    FAILED = "failed"  # collaborator raised


@dataclass(slots=True, frozen=True)
class BestEffort(Generic[T]):
    """Result of a call to a collaborator that must never fail the turn.

    Callers use ``value`` unconditionally; ``outcome`` and ``error`` exist so that
    "nothing stored" can be told apart from "store unreachable" in logs and tests.
    """

    outcome: Outcome
    value: T
    error: Exception | None = None

    @property
    def degraded(self) -> bool:
        return self.outcome in (Outcome.SKIPPED, Outcome.FAILED)

    @classmethod
    def ok(cls, value: T) -> BestEffort[T]:
        return cls(Outcome.OK, value)

    @classmethod
    def empty(cls, value: T) -> BestEffort[T]:
        return cls(Outcome.EMPTY, value)

    @classmethod
    def skipped(cls, value: T) -> BestEffort[T]:
        return cls(Outcome.SKIPPED, value)

    @classmethod
    def failed(cls, value: T, error: Exception) -> BestEffort[T]:
        return cls(Outcome.FAILED, value, error)
