"""User Schemas — public-facing user data."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """A user as returned by create/list endpoints."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    id: UUID = Field(alias="_id")
