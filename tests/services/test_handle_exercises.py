"""ExerciseHandlers — add_exercise and get_log over fake repositories.

Tests cover:
    - Unknown user raises UserNotFoundError before payload validation
    - add_exercise answers with the user's id and a formatted date
    - Invalid payloads never reach the repository
    - get_log passes parsed filters through and counts entries
"""

import uuid
from datetime import date

import pytest

from exercise_tracker.core.domain_types import LogQuery, UserId
from exercise_tracker.core.errors import UserNotFoundError, ValidationError
from exercise_tracker.services.handle_exercises import ExerciseHandlers

TODAY = date(2024, 1, 1)


@pytest.fixture
async def alice(user_repo):
    return await user_repo.create("alice")


@pytest.fixture
def handlers(user_repo, exercise_repo):
    return ExerciseHandlers(user_repo, exercise_repo)


async def test_add_exercise_unknown_user(handlers):
    with pytest.raises(UserNotFoundError):
        await handlers.add_exercise(UserId(uuid.uuid4()), {}, TODAY)


async def test_add_exercise_returns_user_id(handlers, alice, exercise_repo):
    res = await handlers.add_exercise(
        alice.id, {"description": "run", "duration": "30"}, TODAY,
    )
    assert res.id == alice.id
    assert res.id != exercise_repo.rows[0].id
    assert res.username == "alice"
    assert res.duration == 30
    assert res.date == "Mon Jan 01 2024"


async def test_add_exercise_invalid_payload_not_persisted(
    handlers, alice, exercise_repo,
):
    with pytest.raises(ValidationError) as exc_info:
        await handlers.add_exercise(
            alice.id, {"description": "run", "duration": "x"}, TODAY,
        )
    assert exc_info.value.field == "duration"
    assert exercise_repo.rows == []


async def test_get_log_unknown_user(handlers):
    with pytest.raises(UserNotFoundError):
        await handlers.get_log(UserId(uuid.uuid4()))


async def test_get_log_passes_parsed_query(handlers, alice, exercise_repo):
    await handlers.get_log(alice.id, "2024-01-10", "2024-01-31", "3")
    assert exercise_repo.queries == [
        LogQuery(date(2024, 1, 10), date(2024, 1, 31), 3),
    ]


async def test_get_log_counts_entries(handlers, alice):
    for d in ("2024-01-01", "2024-01-15", "2024-02-01"):
        await handlers.add_exercise(
            alice.id, {"description": "run", "duration": "30", "date": d}, TODAY,
        )
    res = await handlers.get_log(alice.id, limit_raw="2")
    assert res.count == 2
    assert [e.date for e in res.log] == ["Mon Jan 01 2024", "Mon Jan 15 2024"]


async def test_get_log_invalid_limit(handlers, alice, exercise_repo):
    with pytest.raises(ValidationError):
        await handlers.get_log(alice.id, limit_raw="0")
    assert exercise_repo.queries == []
