"""Repositories - the only layer that talks to the store.

Invariants:
    - Each repository receives its AsyncSession at construction (no global state)
    - Read queries are built by core.filter_builder; writes go through the ORM
    - Outcomes are returned or raised as typed FormServiceError subclasses
"""
