from pydantic import BaseModel, Field
from typing import List, Literal

# Only JSON bodies are validated
ErrorLocation = Literal["body"]


class FieldError(BaseModel):
    """A single field-level validation failure."""
    msg: str = Field(..., description="Human-readable error message")
    param: str = Field(..., description="Name of the offending field")
    location: ErrorLocation = Field("body", description="Part of the request holding the field")


# =========================
# Error Envelopes
# =========================

class ValidationErrorResponse(BaseModel):
    """Body returned with 400 when request validation fails."""
    errors: List[FieldError] = Field(..., description="Every field violation, in rule order")


class ErrorResponse(BaseModel):
    """Body returned for not-found, upstream and server failures."""
    error: str = Field(..., description="Human-readable error message")
