"""Request Helpers — body decoding and handler wiring shared by route modules.

Invariants:
    - read_payload returns a plain dict for JSON, urlencoded and multipart bodies
    - An empty or missing body decodes to {} (required-field checks happen later)
    - A body that cannot be decoded raises ValidationError, never a 500

Design Decisions:
    - Content-type sniffing over FastAPI Body/Form params: the HTML landing page
      posts forms while API clients post JSON, and both must share one handler
    - Handlers built per request from the request's AsyncSession (get_db)
"""

import json
import logging

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.errors import ValidationError
from exercise_tracker.infrastructure.database import get_db
from exercise_tracker.infrastructure.repositories import (
    SqlExerciseRepository, SqlUserRepository,
)
from exercise_tracker.services.handle_exercises import ExerciseHandlers
from exercise_tracker.services.handle_users import UserHandlers

logger = logging.getLogger(__name__)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_payload(request: Request) -> dict:
    """Decode a JSON or form request body into a dict."""
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return {
            key: value for key, value in form.items() if isinstance(value, str)
        }

    body = await request.body()
    if not body.strip():
        return {}
    try:
        data = json.loads(body)
    except ValueError:
        logger.warning(f"Undecodable body on {request.url.path}")
        raise ValidationError("Request body is not valid JSON or form data")
    if not isinstance(data, dict):
        raise ValidationError("Request body must be an object")
    return data


def get_user_handlers(db: AsyncSession = Depends(get_db)) -> UserHandlers:
    return UserHandlers(SqlUserRepository(db))


def get_exercise_handlers(
    db: AsyncSession = Depends(get_db),
) -> ExerciseHandlers:
    return ExerciseHandlers(SqlUserRepository(db), SqlExerciseRepository(db))
