"""User ORM — a named person who records exercises.

Invariants:
    - id is UUID primary key, generated on create
    - username is non-nullable, unbounded, unique, stored exactly as submitted
    - Users are never updated or deleted by the API

Design Decisions:
    - No relationship to exercises: the log is looked up by user_id at read time
    - created_at kept only to give listings a stable insertion order
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        Text, nullable=False, unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
