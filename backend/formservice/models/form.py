"""Form ORM - a tenant-owned composition of questions.

Invariants:
    - (tenant_id, name) is unique among ACTIVE forms (partial unique index)
    - form_structure is a document with a `questions` array (checked before write)
    - updated_at is refreshed on every update
    - soft-deleted via is_active; inactive forms are invisible to reads and updates
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, String, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from formservice.db.base import Base, Document, TagSet


class Form(Base):
    __tablename__ = "forms"
    __table_args__ = (
        Index(
            "uq_forms_tenant_name_active", "tenant_id", "name",
            unique=True,
            postgresql_where=text("is_active"),
            sqlite_where=text("is_active"),
        ),
        Index("ix_forms_tenant_id", "tenant_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    tenant_id: Mapped[str] = mapped_column(String(255), nullable=False)
    tags: Mapped[list[str] | None] = mapped_column(TagSet, nullable=True)
    form_structure: Mapped[dict] = mapped_column(Document, nullable=False)
    created_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
