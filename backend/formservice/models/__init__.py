"""ORM Models - SQLAlchemy declarative models for the three persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Form and FormResponse rows are partitioned by tenant_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so metadata is complete before create_all/autogenerate
"""

from formservice.models.master_question import MasterQuestion  # noqa: F401
from formservice.models.form import Form  # noqa: F401
from formservice.models.form_response import FormResponse  # noqa: F401
