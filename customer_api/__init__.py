"""Customer API Package — REST service for the customer resource on MongoDB.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
