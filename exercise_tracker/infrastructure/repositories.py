"""SQL Repositories — SQLAlchemy implementations of the core repository protocols.

Invariants:
    - One repository instance per request, bound to that request's AsyncSession
    - Writes commit immediately; a failed commit is rolled back before raising
    - Username uniqueness is arbitrated by the store's UNIQUE constraint only
    - Log queries order by date, then creation time, BEFORE applying the limit

Design Decisions:
    - IntegrityError on users maps to ValidationError (400), not StorageError:
      the conflict is the client's input, not a store fault
    - ORM rows converted to frozen records at the boundary: services never see ORM state
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.domain_types import (
    ExerciseId, ExerciseRecord, LogQuery, NewExercise, UserId, UserRecord,
)
from exercise_tracker.core.errors import ValidationError
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.models.user import User

logger = logging.getLogger(__name__)


def _to_user_record(row: User) -> UserRecord:
    return UserRecord(id=UserId(row.id), username=row.username)


def _to_exercise_record(row: Exercise) -> ExerciseRecord:
    return ExerciseRecord(
        id=ExerciseId(row.id),
        user_id=UserId(row.user_id),
        description=row.description,
        duration=row.duration,
        date=row.date,
    )


class SqlUserRepository:
    """User persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, username: str) -> UserRecord:
        user = User(username=username)
        self._db.add(user)
        try:
            await self._db.commit()
        except IntegrityError:
            await self._db.rollback()
            logger.info(f"Rejected duplicate username {username!r}")
            raise ValidationError(
                f"Username '{username}' is already taken", field="username",
            )
        logger.info(
            f"Created user {username!r}", extra={"user_id": str(user.id)},
        )
        return _to_user_record(user)

    async def list_all(self) -> list[UserRecord]:
        result = await self._db.execute(
            select(User).order_by(User.created_at),
        )
        return [_to_user_record(u) for u in result.scalars().all()]

    async def get(self, user_id: UserId) -> UserRecord | None:
        user = await self._db.get(User, user_id)
        return _to_user_record(user) if user else None


class SqlExerciseRepository:
    """Exercise entry persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(
        self, user_id: UserId, entry: NewExercise,
    ) -> ExerciseRecord:
        exercise = Exercise(
            user_id=user_id,
            description=entry.description,
            duration=entry.duration,
            date=entry.date,
        )
        self._db.add(exercise)
        await self._db.commit()
        logger.info(
            f"Logged exercise {exercise.id}", extra={"user_id": str(user_id)},
        )
        return _to_exercise_record(exercise)

    async def find_for_user(
        self, user_id: UserId, query: LogQuery,
    ) -> list[ExerciseRecord]:
        stmt = select(Exercise).where(Exercise.user_id == user_id)
        if query.from_date is not None:
            stmt = stmt.where(Exercise.date >= query.from_date)
        if query.to_date is not None:
            stmt = stmt.where(Exercise.date <= query.to_date)
        stmt = stmt.order_by(Exercise.date, Exercise.created_at)
        if query.limit is not None:
            stmt = stmt.limit(query.limit)

        result = await self._db.execute(stmt)
        rows = result.scalars().all()
        logger.debug(
            f"Log query {query} returned {len(rows)} entries",
            extra={"user_id": str(user_id)},
        )
        return [_to_exercise_record(r) for r in rows]
