"""Forms - tenant-scoped form definitions.

Invariants:
    - Every path is scoped by tenantId; a form of another tenant is a 404
    - 400 on invalid structure, 409 on (tenant, name) clash, 404 on no active match
"""

from fastapi import APIRouter, Depends, Query, Response, status

from formservice.api.dependencies import get_form_repository, parse_page
from formservice.repositories.forms import FormRepository
from formservice.schemas.form import FormCreate, FormOut, FormUpdate

router = APIRouter(prefix="/api/forms", tags=["forms"])


@router.get("/{tenant_id}", response_model=list[FormOut])
async def list_forms(
    tenant_id: str,
    tags: str | None = Query(None),
    search: str | None = Query(None),
    page: str | None = Query(None),
    limit: str | None = Query(None),
    repo: FormRepository = Depends(get_form_repository),
):
    """List active forms for a tenant, most recently updated first."""
    window = parse_page(page, limit) if page or limit else None
    return await repo.list(tenant_id, tags=tags, search=search, page=window)


@router.get("/{tenant_id}/{form_id}", response_model=FormOut)
async def get_form(
    tenant_id: str, form_id: str,
    repo: FormRepository = Depends(get_form_repository),
):
    return await repo.get(tenant_id, form_id)


@router.post("", response_model=FormOut, status_code=status.HTTP_201_CREATED)
async def create_form(
    body: FormCreate, repo: FormRepository = Depends(get_form_repository),
):
    return await repo.create(body)


@router.put("/{tenant_id}/{form_id}", response_model=FormOut)
async def update_form(
    tenant_id: str, form_id: str, body: FormUpdate,
    repo: FormRepository = Depends(get_form_repository),
):
    return await repo.update(tenant_id, form_id, body)


@router.delete(
    "/{tenant_id}/{form_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def deactivate_form(
    tenant_id: str, form_id: str,
    repo: FormRepository = Depends(get_form_repository),
):
    """Soft delete: the form becomes invisible to reads, updates and submissions."""
    await repo.deactivate(tenant_id, form_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
