"""Master Questions - discovery listing and creation of reusable questions."""

import logging

from fastapi import APIRouter, Depends, Query, status

from formservice.api.dependencies import get_master_question_repository, parse_page
from formservice.repositories.master_questions import MasterQuestionRepository
from formservice.schemas.master_question import MasterQuestionCreate, MasterQuestionOut

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/master-questions", tags=["master-questions"])


@router.get("", response_model=list[MasterQuestionOut])
async def list_master_questions(
    tags: str | None = Query(None),
    type: str | None = Query(None),
    search: str | None = Query(None),
    page: str | None = Query(None),
    limit: str | None = Query(None),
    repo: MasterQuestionRepository = Depends(get_master_question_repository),
):
    """List active master questions, newest first. Paginated only when asked."""
    window = parse_page(page, limit) if page or limit else None
    return await repo.list(tags=tags, type=type, search=search, page=window)


@router.get("/{question_id}", response_model=MasterQuestionOut)
async def get_master_question(
    question_id: str,
    repo: MasterQuestionRepository = Depends(get_master_question_repository),
):
    return await repo.get(question_id)


@router.post(
    "", response_model=MasterQuestionOut,
    status_code=status.HTTP_201_CREATED,
)
async def create_master_question(
    body: MasterQuestionCreate,
    repo: MasterQuestionRepository = Depends(get_master_question_repository),
):
    return await repo.create(body)
