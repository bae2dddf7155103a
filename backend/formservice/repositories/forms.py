"""Form Repository - tenant-scoped reads and guarded writes for form definitions.

Invariants:
    - Every query is scoped by tenant_id AND is_active; a correct id under another
      tenant is NotFound, never a cross-tenant read
    - Structure is validated before any store interaction (ValidationFailed
      short-circuits)
    - A (tenant_id, name) clash among active forms surfaces as ConflictError (409),
      never as a raw IntegrityError
    - update/deactivate refresh updated_at; zero matching rows is NotFound

Design Decisions:
    - Uniqueness is left to the partial unique index and detected on commit, so two
      concurrent creates cannot both succeed
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from formservice.core.errors import (
    ConflictError, ErrorContext, NotFoundError, ValidationFailedError,
)
from formservice.core.filter_builder import IsTrue, contains, equals, tags_overlap
from formservice.core.pagination import Page
from formservice.core.validate_structure import validate_form_structure
from formservice.models.form import Form
from formservice.repositories.base import Repository, is_unique_violation, parse_id
from formservice.schemas.form import FormCreate, FormUpdate

logger = logging.getLogger(__name__)

NAME_CONFLICT = "Form name already exists for this tenant"


def _check_structure(form_structure: object, tenant_id: str) -> None:
    check = validate_form_structure(form_structure)
    if not check.valid:
        raise ValidationFailedError(
            check.error, "form_structure", ErrorContext(tenant_id=tenant_id),
        )


class FormRepository(Repository[Form]):
    model = Form
    order_by = ("updated_at DESC", "id DESC")

    async def list(
        self,
        tenant_id: str,
        tags: str | None = None,
        search: str | None = None,
        page: Page | None = None,
    ) -> list[Form]:
        query = self.builder().where(
            equals("tenant_id", tenant_id),
            IsTrue("is_active"),
            tags_overlap("tags", tags),
            contains("name", search),
        ).build(page)
        return await self.fetch(query)

    async def get(self, tenant_id: str, form_id: str) -> Form:
        parsed = parse_id(form_id)
        form = None
        if parsed is not None:
            result = await self._db.execute(
                select(Form).where(
                    Form.id == parsed,
                    Form.tenant_id == tenant_id,
                    Form.is_active.is_(True),
                ),
            )
            form = result.scalar_one_or_none()
        if form is None:
            raise NotFoundError(
                "Form", str(form_id),
                ErrorContext(tenant_id=tenant_id, form_id=str(form_id)),
            )
        return form

    async def create(self, payload: FormCreate) -> Form:
        _check_structure(payload.form_structure, payload.tenant_id)
        form = Form(
            name=payload.name,
            tenant_id=payload.tenant_id,
            tags=payload.tags,
            form_structure=payload.form_structure,
            created_by=payload.created_by,
        )
        self._db.add(form)
        await self._commit_or_conflict(payload.tenant_id)
        await self._db.refresh(form)
        logger.info(
            f"Form created: {form.id}",
            extra={"tenant_id": form.tenant_id, "form_id": str(form.id)},
        )
        return form

    async def update(
        self, tenant_id: str, form_id: str, patch: FormUpdate,
    ) -> Form:
        _check_structure(patch.form_structure, tenant_id)
        form = await self.get(tenant_id, form_id)
        form.name = patch.name
        form.tags = patch.tags
        form.form_structure = patch.form_structure
        form.updated_at = datetime.now(timezone.utc)
        await self._commit_or_conflict(tenant_id)
        await self._db.refresh(form)
        return form

    async def deactivate(self, tenant_id: str, form_id: str) -> None:
        form = await self.get(tenant_id, form_id)
        form.is_active = False
        form.updated_at = datetime.now(timezone.utc)
        await self._db.commit()
        logger.info(
            f"Form deactivated: {form.id}",
            extra={"tenant_id": tenant_id, "form_id": str(form.id)},
        )

    async def _commit_or_conflict(self, tenant_id: str) -> None:
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            if is_unique_violation(e):
                raise ConflictError(NAME_CONFLICT, ErrorContext(tenant_id=tenant_id))
            raise
