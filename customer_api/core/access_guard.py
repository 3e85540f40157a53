"""Access Guard — shared-secret check for mutating endpoints.

Invariants:
    - None → AuthMissingError, mismatch → AuthInvalidError, match → returns None
    - Expected secret is passed in by the caller, never read from the environment here
    - No session state: every request is checked independently
"""

import hmac

from customer_api.core.errors import AuthInvalidError, AuthMissingError


def check_api_key(provided: str | None, expected: str) -> None:
    """Raise unless provided equals the configured shared secret."""
    if provided is None:
        raise AuthMissingError()
    if not hmac.compare_digest(provided.encode(), expected.encode()):
        raise AuthInvalidError()
