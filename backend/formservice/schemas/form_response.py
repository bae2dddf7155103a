"""Form Response Schemas - submission body, stored row, and paginated listing."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class FormResponseCreate(BaseModel):
    responses: dict[str, Any] | list[Any]
    user_id: str | None = None
    session_id: str | None = None
    is_complete: bool | None = None


class FormResponseOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    form_id: UUID
    tenant_id: str
    user_id: str | None = None
    session_id: str | None = None
    responses: dict[str, Any] | list[Any]
    is_complete: bool
    ip_address: str | None = None
    user_agent: str | None = None
    submitted_at: datetime


class PaginationOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int = Field(alias="totalPages")


class FormResponsePage(BaseModel):
    responses: list[FormResponseOut]
    pagination: PaginationOut
