"""Exercise Handlers — add_exercise, get_log.

Invariants:
    - The user is looked up FIRST: an unknown id is a 404 even if the payload is bad
    - Exercise fields validated (core/validation.py) before the insert
    - The add_exercise response carries the user's id, not the exercise's
    - get_log count == number of entries returned after filtering and limiting

Design Decisions:
    - `today` injected by the caller: the shell reads the clock, handlers stay testable
    - Existence check here replaces a foreign key (exercises.user_id is a weak reference)
"""

from datetime import date

from exercise_tracker.core.domain_types import Invalid, UserId, UserRecord
from exercise_tracker.core.errors import UserNotFoundError, ValidationError
from exercise_tracker.core.format_dates import format_calendar_date
from exercise_tracker.core.repository_protocols import (
    ExerciseRepository, UserRepository,
)
from exercise_tracker.core.validation import (
    validate_log_query, validate_new_exercise,
)
from exercise_tracker.schemas.exercise import (
    ExerciseAddedResponse, ExerciseLogResponse, LogEntry,
)


class ExerciseHandlers:
    """Exercise logging and log retrieval."""

    def __init__(self, users: UserRepository, exercises: ExerciseRepository):
        self.users = users
        self.exercises = exercises

    async def _get_user_or_404(self, user_id: UserId) -> UserRecord:
        user = await self.users.get(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def add_exercise(
        self, user_id: UserId, payload: dict, today: date,
    ) -> ExerciseAddedResponse:
        """Record an exercise for an existing user."""
        user = await self._get_user_or_404(user_id)
        entry = validate_new_exercise(
            payload.get("description"),
            payload.get("duration"),
            payload.get("date"),
            today,
        )
        if isinstance(entry, Invalid):
            raise ValidationError(entry.message, field=entry.field)

        saved = await self.exercises.create(user.id, entry)
        return ExerciseAddedResponse(
            username=user.username,
            description=saved.description,
            duration=saved.duration,
            date=format_calendar_date(saved.date),
            id=user.id,
        )

    async def get_log(
        self,
        user_id: UserId,
        from_raw: str | None = None,
        to_raw: str | None = None,
        limit_raw: str | None = None,
    ) -> ExerciseLogResponse:
        """Return the user's log, filtered by date range and capped by limit."""
        user = await self._get_user_or_404(user_id)
        query = validate_log_query(from_raw, to_raw, limit_raw)
        if isinstance(query, Invalid):
            raise ValidationError(query.message, field=query.field)

        entries = await self.exercises.find_for_user(user.id, query)
        log = [
            LogEntry(
                description=e.description,
                duration=e.duration,
                date=format_calendar_date(e.date),
            )
            for e in entries
        ]
        return ExerciseLogResponse(
            id=user.id, username=user.username, count=len(log), log=log,
        )
