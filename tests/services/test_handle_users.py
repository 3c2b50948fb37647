"""UserHandlers — create_user and list_users over fake repositories."""

import pytest

from exercise_tracker.core.errors import ValidationError
from exercise_tracker.services.handle_users import UserHandlers


async def test_create_user_returns_response(user_repo):
    handlers = UserHandlers(user_repo)
    res = await handlers.create_user({"username": "alice"})
    assert res.username == "alice"
    assert res.id == user_repo.rows[0].id


async def test_create_user_serializes_id_as_underscore_id(user_repo):
    res = await UserHandlers(user_repo).create_user({"username": "alice"})
    dumped = res.model_dump(by_alias=True, mode="json")
    assert set(dumped) == {"username", "_id"}


async def test_invalid_username_never_reaches_repository(user_repo):
    handlers = UserHandlers(user_repo)
    with pytest.raises(ValidationError) as exc_info:
        await handlers.create_user({"username": "   "})
    assert exc_info.value.field == "username"
    assert user_repo.rows == []


async def test_duplicate_username_propagates_validation_error(user_repo):
    handlers = UserHandlers(user_repo)
    await handlers.create_user({"username": "alice"})
    with pytest.raises(ValidationError):
        await handlers.create_user({"username": "alice"})


async def test_list_users(user_repo):
    handlers = UserHandlers(user_repo)
    for name in ("a", "b"):
        await handlers.create_user({"username": name})
    assert [u.username for u in await handlers.list_users()] == ["a", "b"]
