"""Core Layer - pure query building and payload validation, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from repositories/, api/, infrastructure/, or models/
    - All functions are pure and deterministic
"""
