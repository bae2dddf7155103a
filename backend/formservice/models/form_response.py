"""FormResponse ORM - one append-only submission against a form.

Invariants:
    - form_id must reference an active form of the same tenant; checked by the
      repository before insert, NOT by a foreign key
    - rows are immutable once written (no update/delete path)
    - several rows per (form_id, user_id) or session_id are allowed (partial saves)

Design Decisions:
    - No FK to forms: tenant + active checks need the application-level lookup anyway
"""

import uuid
from typing import Any
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from formservice.db.base import Base, Document


class FormResponse(Base):
    __tablename__ = "form_responses"
    __table_args__ = (
        Index("ix_form_responses_form_tenant", "form_id", "tenant_id"),
        Index("ix_form_responses_session_id", "session_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    form_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    tenant_id: Mapped[str] = mapped_column(String(255), nullable=False)
    user_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    session_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    responses: Mapped[Any] = mapped_column(Document, nullable=False)
    is_complete: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    ip_address: Mapped[str | None] = mapped_column(String(64), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(Text, nullable=True)
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
