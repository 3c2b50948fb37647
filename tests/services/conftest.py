"""Service test fixtures — in-memory repositories satisfying the core protocols.

Invariants:
    - Fakes honour the same contracts as the SQL repositories (uniqueness,
      date ordering before limit) so handler tests need no database
"""

import uuid

import pytest

from exercise_tracker.core.domain_types import (
    ExerciseId, ExerciseRecord, LogQuery, NewExercise, UserId, UserRecord,
)
from exercise_tracker.core.errors import ValidationError


class FakeUserRepository:
    def __init__(self):
        self.rows: list[UserRecord] = []

    async def create(self, username: str) -> UserRecord:
        if any(u.username == username for u in self.rows):
            raise ValidationError(f"Username '{username}' is already taken")
        user = UserRecord(id=UserId(uuid.uuid4()), username=username)
        self.rows.append(user)
        return user

    async def list_all(self) -> list[UserRecord]:
        return list(self.rows)

    async def get(self, user_id: UserId) -> UserRecord | None:
        return next((u for u in self.rows if u.id == user_id), None)


class FakeExerciseRepository:
    def __init__(self):
        self.rows: list[ExerciseRecord] = []
        self.queries: list[LogQuery] = []

    async def create(self, user_id: UserId, entry: NewExercise) -> ExerciseRecord:
        record = ExerciseRecord(
            id=ExerciseId(uuid.uuid4()), user_id=user_id,
            description=entry.description, duration=entry.duration,
            date=entry.date,
        )
        self.rows.append(record)
        return record

    async def find_for_user(
        self, user_id: UserId, query: LogQuery,
    ) -> list[ExerciseRecord]:
        self.queries.append(query)
        rows = [
            r for r in self.rows
            if r.user_id == user_id
            and (query.from_date is None or r.date >= query.from_date)
            and (query.to_date is None or r.date <= query.to_date)
        ]
        rows.sort(key=lambda r: r.date)
        return rows[:query.limit] if query.limit is not None else rows


@pytest.fixture
def user_repo():
    return FakeUserRepository()


@pytest.fixture
def exercise_repo():
    return FakeExerciseRepository()
