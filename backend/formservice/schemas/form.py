"""Form Schemas - request/response models for /api/forms.

Invariants:
    - FormCreate accepts the tenant as `tenantId` (wire name) or `tenant_id`
    - form_structure is typed Any on purpose: its shape is judged by
      core.validate_structure, which must see null/primitives too
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class FormCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    tenant_id: str = Field(alias="tenantId", min_length=1)
    tags: list[str] | None = None
    form_structure: Any
    created_by: str | None = None


class FormUpdate(BaseModel):
    """Full replacement of the mutable fields (PUT semantics)."""
    name: str = Field(min_length=1)
    tags: list[str] | None = None
    form_structure: Any


class FormOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    tenant_id: str
    tags: list[str] | None = None
    form_structure: dict[str, Any]
    created_by: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
