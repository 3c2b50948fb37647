"""Users API — create users, list users, log exercises, read exercise logs.

Invariants:
    - Paths and response keys (`_id`) match the existing client contract
    - Routes never contain business logic (delegate to services/handle_*.py)
    - Errors are raised as ExerciseTrackerError and rendered by api/error_handlers.py

Design Decisions:
    - Path ids typed as UUID: a malformed id fails request validation (400)
    - Log filters received as raw strings: core/validation.py owns parsing
"""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from exercise_tracker.api.routes.request_helpers import (
    get_exercise_handlers, get_user_handlers, read_payload,
)
from exercise_tracker.core.domain_types import UserId
from exercise_tracker.schemas.exercise import (
    ExerciseAddedResponse, ExerciseLogResponse,
)
from exercise_tracker.schemas.user import UserResponse
from exercise_tracker.services.handle_exercises import ExerciseHandlers
from exercise_tracker.services.handle_users import UserHandlers

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
async def create_user(
    payload: dict = Depends(read_payload),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    """Create a user from a `username` field."""
    return await handlers.create_user(payload)


@router.get("", response_model=list[UserResponse])
async def list_users(handlers: UserHandlers = Depends(get_user_handlers)):
    """List every user."""
    return await handlers.list_users()


@router.post("/{user_id}/exercises", response_model=ExerciseAddedResponse)
async def add_exercise(
    user_id: UUID,
    payload: dict = Depends(read_payload),
    handlers: ExerciseHandlers = Depends(get_exercise_handlers),
):
    """Log an exercise (description, duration, optional date) for a user."""
    return await handlers.add_exercise(UserId(user_id), payload, date.today())


@router.get("/{user_id}/logs", response_model=ExerciseLogResponse)
async def get_log(
    user_id: UUID,
    from_: str | None = Query(None, alias="from"),
    to: str | None = None,
    limit: str | None = None,
    handlers: ExerciseHandlers = Depends(get_exercise_handlers),
):
    """Return the user's exercise log with optional from/to/limit filters."""
    return await handlers.get_log(UserId(user_id), from_, to, limit)
