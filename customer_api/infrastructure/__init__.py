"""Infrastructure Layer — MongoDB client, customer store, logging setup.

Invariants:
    - Driver exceptions never escape: they are mapped to StorageError (core/errors.py)
"""
