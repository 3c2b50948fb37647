"""User Handlers — create_user, list_users.

Invariants:
    - Username validated (core/validation.py) before any store call
    - Uniqueness is left to the store; a conflict surfaces as ValidationError
    - Listing returns users in store insertion order

Design Decisions:
    - Handlers take repositories, not sessions: tests can pass in-memory fakes
"""

from exercise_tracker.core.domain_types import Invalid
from exercise_tracker.core.errors import ValidationError
from exercise_tracker.core.validation import validate_username
from exercise_tracker.core.repository_protocols import UserRepository
from exercise_tracker.schemas.user import UserResponse


class UserHandlers:
    """User registration and listing."""

    def __init__(self, users: UserRepository):
        self.users = users

    async def create_user(self, payload: dict) -> UserResponse:
        username = validate_username(payload.get("username"))
        if isinstance(username, Invalid):
            raise ValidationError(username.message, field=username.field)
        user = await self.users.create(username)
        return UserResponse(username=user.username, id=user.id)

    async def list_users(self) -> list[UserResponse]:
        return [
            UserResponse(username=u.username, id=u.id)
            for u in await self.users.list_all()
        ]
