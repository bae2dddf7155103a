"""Master Question Schemas - request/response models for /api/master-questions.

Invariants:
    - text and type are required and non-blank
    - max_selections, when present, is a positive integer
    - type membership in the configured set is checked by the repository (config-driven)
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MasterQuestionCreate(BaseModel):
    text: str = Field(min_length=1)
    type: str = Field(min_length=1)
    options: list[Any] | None = None
    max_selections: int | None = Field(None, gt=0)
    tags: list[str] | None = None

    @field_validator("text", "type")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class MasterQuestionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    text: str
    type: str
    options: list[Any] | None = None
    max_selections: int | None = None
    tags: list[str] | None = None
    is_active: bool
    created_at: datetime
