"""Error Schemas — OpenAPI description of the error envelope.

The runtime body is built by core.errors.build_envelope; these models exist so
the 400/401 responses are documented with a schema.
"""

from pydantic import BaseModel


class ErrorContent(BaseModel):
    code: int
    reason: str
    description: str | None = None


class ErrorEnvelope(BaseModel):
    error: ErrorContent


ERROR_RESPONSES = {
    400: {
        "model": ErrorEnvelope,
        "description": "The request given is wrongly formatted or data was missing.",
    },
}

AUTH_ERROR_RESPONSES = {
    401: {
        "model": ErrorEnvelope,
        "description": "The authentication given was incorrect or insufficient.",
    },
}
