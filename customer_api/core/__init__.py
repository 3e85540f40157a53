"""Core Layer — validation, pagination, access guard and error taxonomy. No IO.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - All functions are pure and deterministic
"""
