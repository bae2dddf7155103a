"""Database Infrastructure - SQLAlchemy declarative base and portable column types.

Design Decisions:
    - asyncpg driver for PostgreSQL (native async); aiosqlite for tests
"""
