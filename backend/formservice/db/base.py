"""SQLAlchemy Declarative Base - shared base class and column types for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - TagSet is TEXT[] on PostgreSQL (supports &&) and a JSON array elsewhere
    - Document is JSONB on PostgreSQL and JSON elsewhere

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - with_variant column types: one model definition serves PostgreSQL in
      production and SQLite in the test suite
"""

from sqlalchemy import JSON, String
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.orm import DeclarativeBase

TagSet = ARRAY(String).with_variant(JSON(none_as_null=True), "sqlite")
Document = JSON(none_as_null=True).with_variant(
    JSONB(none_as_null=True), "postgresql",
)


class Base(DeclarativeBase):
    """Base class for all form service ORM models."""
    pass
