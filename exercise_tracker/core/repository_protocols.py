"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - All store operations accessed through Protocol types
    - Implementations provided by the infrastructure layer per request

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Repositories return frozen records, never ORM instances
"""

from typing import Protocol

from exercise_tracker.core.domain_types import (
    ExerciseRecord, LogQuery, NewExercise, UserId, UserRecord,
)


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def create(self, username: str) -> UserRecord: ...
    async def list_all(self) -> list[UserRecord]: ...
    async def get(self, user_id: UserId) -> UserRecord | None: ...


class ExerciseRepository(Protocol):
    """Contract for exercise entry persistence."""
    async def create(
        self, user_id: UserId, entry: NewExercise,
    ) -> ExerciseRecord: ...
    async def find_for_user(
        self, user_id: UserId, query: LogQuery,
    ) -> list[ExerciseRecord]: ...
