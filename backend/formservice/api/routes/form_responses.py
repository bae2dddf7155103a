"""Form Responses - submission and paginated listing of answers to a form.

Invariants:
    - Submissions require an active form of the same tenant (404 otherwise)
    - ip_address and user_agent are taken from the request, never from the body
    - Listing always paginates; pagination.total follows FormResponseRepository
"""

from fastapi import APIRouter, Depends, Query, Request, status

from formservice.api.dependencies import get_form_response_repository, parse_page
from formservice.repositories.form_responses import FormResponseRepository
from formservice.schemas.form_response import (
    FormResponseCreate, FormResponseOut, FormResponsePage, PaginationOut,
)

router = APIRouter(prefix="/api/forms", tags=["form-responses"])


@router.post(
    "/{tenant_id}/{form_id}/responses",
    response_model=FormResponseOut,
    status_code=status.HTTP_201_CREATED,
)
async def submit_response(
    tenant_id: str, form_id: str, body: FormResponseCreate, request: Request,
    repo: FormResponseRepository = Depends(get_form_response_repository),
):
    return await repo.create(
        tenant_id, form_id, body,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )


@router.get(
    "/{tenant_id}/{form_id}/responses", response_model=FormResponsePage,
)
async def list_responses(
    tenant_id: str, form_id: str,
    page: str | None = Query(None),
    limit: str | None = Query(None),
    is_complete: str | None = Query(None),
    user_id: str | None = Query(None),
    repo: FormResponseRepository = Depends(get_form_response_repository),
):
    result = await repo.list_page(
        tenant_id, form_id, parse_page(page, limit),
        is_complete=is_complete, user_id=user_id,
    )
    return FormResponsePage(
        responses=[FormResponseOut.model_validate(r) for r in result.items],
        pagination=PaginationOut(
            page=result.page.number,
            limit=result.page.limit,
            total=result.total,
            total_pages=result.total_pages,
        ),
    )


@router.get(
    "/{tenant_id}/{form_id}/responses/{response_id}",
    response_model=FormResponseOut,
)
async def get_response(
    tenant_id: str, form_id: str, response_id: str,
    repo: FormResponseRepository = Depends(get_form_response_repository),
):
    return await repo.get(tenant_id, form_id, response_id)
