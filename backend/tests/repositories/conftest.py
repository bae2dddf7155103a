"""Repository fixtures - seed helpers writing rows straight through the ORM."""

from datetime import datetime, timedelta, timezone

import pytest

from formservice.models.form import Form
from formservice.models.form_response import FormResponse
from formservice.models.master_question import MasterQuestion

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def seed_question(test_db):
    async def _seed(text="Favourite colour?", type="single_select", tags=None,
                    is_active=True, minutes=0, **fields):
        question = MasterQuestion(
            text=text, type=type, tags=tags, is_active=is_active,
            created_at=BASE_TIME + timedelta(minutes=minutes), **fields,
        )
        test_db.add(question)
        await test_db.commit()
        return question
    return _seed


@pytest.fixture
def seed_form(test_db):
    async def _seed(name="Survey", tenant_id="t1", tags=None, is_active=True,
                    minutes=0, form_structure=None):
        stamp = BASE_TIME + timedelta(minutes=minutes)
        form = Form(
            name=name, tenant_id=tenant_id, tags=tags, is_active=is_active,
            form_structure=form_structure or {"questions": []},
            created_at=stamp, updated_at=stamp,
        )
        test_db.add(form)
        await test_db.commit()
        return form
    return _seed


@pytest.fixture
def seed_responses(test_db):
    async def _seed(form, count, is_complete=lambda i: False, user_id=lambda i: None):
        rows = [
            FormResponse(
                form_id=form.id, tenant_id=form.tenant_id,
                responses={"n": i},
                is_complete=is_complete(i),
                user_id=user_id(i),
                submitted_at=BASE_TIME + timedelta(seconds=i),
            )
            for i in range(count)
        ]
        test_db.add_all(rows)
        await test_db.commit()
        return rows
    return _seed
