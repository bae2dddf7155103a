"""Form Service Package - multi-tenant form definitions and responses.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
