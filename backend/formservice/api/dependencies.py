"""Repository Dependencies - per-request repository construction for FastAPI routes.

Invariants:
    - Repositories share the request's single AsyncSession (from get_db)
    - Config-driven behaviour (question types, total counting) injected here,
      so repositories never read settings themselves
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from formservice.config import get_settings
from formservice.core.pagination import Page
from formservice.infrastructure.database import get_db
from formservice.repositories.form_responses import FormResponseRepository
from formservice.repositories.forms import FormRepository
from formservice.repositories.master_questions import MasterQuestionRepository


def get_master_question_repository(
    db: AsyncSession = Depends(get_db),
) -> MasterQuestionRepository:
    return MasterQuestionRepository(
        db, question_types=get_settings().question_types,
    )


def get_form_repository(db: AsyncSession = Depends(get_db)) -> FormRepository:
    return FormRepository(db)


def get_form_response_repository(
    db: AsyncSession = Depends(get_db),
) -> FormResponseRepository:
    return FormResponseRepository(
        db, apply_filters_to_total=get_settings().response_total_applies_filters,
    )


def parse_page(page: str | None, limit: str | None) -> Page:
    settings = get_settings()
    return Page.parse(
        page, limit,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )
