"""Initial schema - master_questions, forms, form_responses.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "master_questions",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("text", sa.Text, nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("options", JSONB, nullable=True),
        sa.Column("max_selections", sa.Integer, nullable=True),
        sa.Column("tags", ARRAY(sa.String), nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_master_questions_tags", "master_questions", ["tags"], postgresql_using="gin")

    op.create_table(
        "forms",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("tenant_id", sa.String(255), nullable=False),
        sa.Column("tags", ARRAY(sa.String), nullable=True),
        sa.Column("form_structure", JSONB, nullable=False),
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_forms_tenant_id", "forms", ["tenant_id"])
    op.create_index(
        "uq_forms_tenant_name_active", "forms", ["tenant_id", "name"],
        unique=True, postgresql_where=sa.text("is_active"),
    )

    op.create_table(
        "form_responses",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("form_id", UUID(as_uuid=True), nullable=False),
        sa.Column("tenant_id", sa.String(255), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=True),
        sa.Column("session_id", sa.String(255), nullable=True),
        sa.Column("responses", JSONB, nullable=False),
        sa.Column("is_complete", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("ip_address", sa.String(64), nullable=True),
        sa.Column("user_agent", sa.Text, nullable=True),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_form_responses_form_tenant", "form_responses", ["form_id", "tenant_id"])
    op.create_index("ix_form_responses_session_id", "form_responses", ["session_id"])


def downgrade() -> None:
    op.drop_table("form_responses")
    op.drop_table("forms")
    op.drop_table("master_questions")
