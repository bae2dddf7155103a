"""Form Response Repository - append-only submissions and their paginated listing.

Invariants:
    - A response is only inserted after its form is confirmed active and owned by
      the same tenant; otherwise NotFound (never a raw FK error)
    - Listings are scoped by form_id AND tenant_id, newest first, always paginated
    - is_complete is tri-state: absent means no filter, false means incomplete only

Design Decisions:
    - Existence check and insert share one session but no lock: a form deactivated
      between the two statements can still receive this one response (accepted gap)
    - total counts the base scope (form_id + tenant_id) unless
      apply_filters_to_total is set; historical callers rely on that count
"""

import logging
from dataclasses import dataclass

from sqlalchemy import select

from formservice.core.errors import ErrorContext, NotFoundError
from formservice.core.filter_builder import equals, flag
from formservice.core.pagination import Page
from formservice.models.form_response import FormResponse
from formservice.repositories.base import Repository, parse_id
from formservice.repositories.forms import FormRepository
from formservice.schemas.form_response import FormResponseCreate

logger = logging.getLogger(__name__)


@dataclass
class ResponsePage:
    items: list[FormResponse]
    page: Page
    total: int

    @property
    def total_pages(self) -> int:
        return self.page.total_pages(self.total)


class FormResponseRepository(Repository[FormResponse]):
    model = FormResponse
    order_by = ("submitted_at DESC", "id DESC")

    def __init__(self, db, apply_filters_to_total: bool = False):
        super().__init__(db)
        self._apply_filters_to_total = apply_filters_to_total
        self._forms = FormRepository(db)

    async def create(
        self,
        tenant_id: str,
        form_id: str,
        payload: FormResponseCreate,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> FormResponse:
        form = await self._forms.get(tenant_id, form_id)
        response = FormResponse(
            form_id=form.id,
            tenant_id=tenant_id,
            user_id=payload.user_id,
            session_id=payload.session_id,
            responses=payload.responses,
            is_complete=payload.is_complete or False,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        self._db.add(response)
        await self._db.commit()
        await self._db.refresh(response)
        logger.info(
            f"Form response recorded: {response.id}",
            extra={"tenant_id": tenant_id, "form_id": str(form.id)},
        )
        return response

    async def list_page(
        self,
        tenant_id: str,
        form_id: str,
        page: Page,
        is_complete: str | bool | None = None,
        user_id: str | None = None,
    ) -> ResponsePage:
        parsed = parse_id(form_id)
        if parsed is None:
            return ResponsePage(items=[], page=page, total=0)

        scope = (equals("form_id", parsed), equals("tenant_id", tenant_id))
        filters = (flag("is_complete", is_complete), equals("user_id", user_id))

        items = await self.fetch(
            self.builder().where(*scope, *filters).build(page),
        )
        counted = self.builder().where(*scope)
        if self._apply_filters_to_total:
            counted.where(*filters)
        total = await self.count(counted.build_count())
        return ResponsePage(items=items, page=page, total=total)

    async def get(
        self, tenant_id: str, form_id: str, response_id: str,
    ) -> FormResponse:
        parsed_form, parsed_response = parse_id(form_id), parse_id(response_id)
        response = None
        if parsed_form is not None and parsed_response is not None:
            result = await self._db.execute(
                select(FormResponse).where(
                    FormResponse.id == parsed_response,
                    FormResponse.form_id == parsed_form,
                    FormResponse.tenant_id == tenant_id,
                ),
            )
            response = result.scalar_one_or_none()
        if response is None:
            raise NotFoundError(
                "Form response", str(response_id),
                ErrorContext(tenant_id=tenant_id, form_id=str(form_id)),
            )
        return response
