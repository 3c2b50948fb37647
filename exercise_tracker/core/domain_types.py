"""Domain Types — identifiers and value objects shared by core, services and shell.

Invariants:
    - UserId and ExerciseId wrap UUIDs: never use bare UUID in domain logic
    - Value objects are frozen: once validated, they are not mutated
    - Dates are calendar dates (datetime.date), never timestamps

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost, full type-checker support
    - Records (UserRecord, ExerciseRecord) decouple services from the ORM models
"""

from dataclasses import dataclass
from datetime import date
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
ExerciseId = NewType("ExerciseId", UUID)


# ─── Validated Inputs ────────────────────────────────────────────

@dataclass(frozen=True)
class NewExercise:
    """Exercise entry ready for persistence."""
    description: str
    duration: int  # minutes
    date: date


@dataclass(frozen=True)
class LogQuery:
    """Filters for an exercise log lookup. None means unbounded."""
    from_date: date | None = None
    to_date: date | None = None
    limit: int | None = None


@dataclass(frozen=True)
class Invalid:
    """Validation failure: the field at fault and a client-facing message."""
    field: str
    message: str


# ─── Stored Records ──────────────────────────────────────────────

@dataclass(frozen=True)
class UserRecord:
    id: UserId
    username: str


@dataclass(frozen=True)
class ExerciseRecord:
    id: ExerciseId
    user_id: UserId
    description: str
    duration: int
    date: date
