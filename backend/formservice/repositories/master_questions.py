"""Master Question Repository - discovery listing and creation of reusable questions.

Invariants:
    - Listings only ever return active questions, newest first
    - type must belong to the configured question_types (when that set is non-empty)
"""

import logging
from collections.abc import Iterable

from sqlalchemy import select

from formservice.core.errors import NotFoundError, ValidationFailedError
from formservice.core.filter_builder import IsTrue, contains, equals, tags_overlap
from formservice.core.pagination import Page
from formservice.models.master_question import MasterQuestion
from formservice.repositories.base import Repository, parse_id
from formservice.schemas.master_question import MasterQuestionCreate

logger = logging.getLogger(__name__)


class MasterQuestionRepository(Repository[MasterQuestion]):
    model = MasterQuestion
    order_by = ("created_at DESC", "id DESC")

    def __init__(self, db, question_types: Iterable[str] = ()):
        super().__init__(db)
        self._question_types = frozenset(question_types)

    async def list(
        self,
        tags: str | None = None,
        type: str | None = None,
        search: str | None = None,
        page: Page | None = None,
    ) -> list[MasterQuestion]:
        query = self.builder().where(
            IsTrue("is_active"),
            tags_overlap("tags", tags),
            equals("type", type),
            contains("text", search),
        ).build(page)
        return await self.fetch(query)

    async def get(self, question_id: str) -> MasterQuestion:
        parsed = parse_id(question_id)
        question = None
        if parsed is not None:
            result = await self._db.execute(
                select(MasterQuestion).where(
                    MasterQuestion.id == parsed,
                    MasterQuestion.is_active.is_(True),
                ),
            )
            question = result.scalar_one_or_none()
        if question is None:
            raise NotFoundError("Master question", str(question_id))
        return question

    async def create(self, payload: MasterQuestionCreate) -> MasterQuestion:
        if self._question_types and payload.type not in self._question_types:
            raise ValidationFailedError(
                f"Unknown question type '{payload.type}'. "
                f"Allowed: {', '.join(sorted(self._question_types))}",
                "type",
            )
        question = MasterQuestion(
            text=payload.text,
            type=payload.type,
            options=payload.options,
            max_selections=payload.max_selections,
            tags=payload.tags,
        )
        self._db.add(question)
        await self._db.commit()
        await self._db.refresh(question)
        logger.info(f"Master question created: {question.id}")
        return question
