"""Exercise Schemas — responses for logging exercises and reading the log.

Invariants:
    - ExerciseAddedResponse.id is the USER's id, not the exercise's
    - ExerciseLogResponse.count always equals len(log)
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ExerciseAddedResponse(BaseModel):
    """User fields merged with the exercise just logged."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    description: str
    duration: int
    date: str
    id: UUID = Field(alias="_id")


class LogEntry(BaseModel):
    description: str
    duration: int
    date: str


class ExerciseLogResponse(BaseModel):
    """A user's exercise log after filtering and limiting."""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    username: str
    count: int = Field(ge=0)
    log: list[LogEntry]

    @model_validator(mode="after")
    def count_matches_log(self):
        if self.count != len(self.log):
            raise ValueError("count must equal the number of log entries")
        return self
