"""
Core Validators

Field rules for request bodies, run from pydantic `field_validator`s on the
request records. A rule never stops at its first failure: all of a field's
violations travel in one pydantic error and are expanded back into separate
entries by `field_errors`, so a single response reports every violation of
every field.
"""
import re
from typing import Any, Dict, List, Sequence

from pydantic_core import PydanticCustomError

from config import LANGUAGE_CODE_MIN_LENGTH, LANGUAGE_CODE_MAX_LENGTH
from schemas import FieldError
from .sanitizer import sanitize

ALPHA_PATTERN = re.compile(r"^[A-Za-z]+$")

RULE_ERROR_TYPE = "field_rule"
BODY_NOT_OBJECT_MESSAGE = "Request body must be a JSON object"


# =========================
# Checks
# =========================

def check_text(value: Any, label: str = "Text") -> List[str]:
    """Text must be a string and non-empty once tags and whitespace are stripped."""
    errors = []
    if not isinstance(value, str):
        errors.append(f"{label} must be a string")
    if value is None or (isinstance(value, str) and not sanitize(value)):
        errors.append(f"{label} is required")
    return errors


def check_language_code(value: Any, label: str) -> List[str]:
    """Language codes are alphabetic, 2 to 5 characters long."""
    candidate = value if isinstance(value, str) else ""
    errors = []
    if not ALPHA_PATTERN.match(candidate):
        errors.append(f"{label} must be a valid language code")
    if not LANGUAGE_CODE_MIN_LENGTH <= len(candidate) <= LANGUAGE_CODE_MAX_LENGTH:
        errors.append(f"{label} code length is invalid")
    return errors


def check_string(value: Any, message: str) -> List[str]:
    if not isinstance(value, str):
        return [message]
    return []


# =========================
# Validator Helpers
# =========================

def enforce(messages: List[str], value: Any) -> str:
    """Raise all violations as one pydantic error, or return the sanitized value."""
    if messages:
        raise PydanticCustomError(
            RULE_ERROR_TYPE,
            "{message}",
            {"message": messages[0], "messages": messages}
        )
    return sanitize(value)


def validate_text(value: Any, label: str = "Text") -> str:
    return enforce(check_text(value, label), value)


def validate_language_code(value: Any, label: str) -> str:
    return enforce(check_language_code(value, label), value)


def validate_string(value: Any, message: str) -> str:
    return enforce(check_string(value, message), value)


# =========================
# Error Conversion
# =========================

def field_errors(errors: Sequence[Dict[str, Any]]) -> List[FieldError]:
    """
    Convert pydantic (or FastAPI request) errors into FieldErrors.

    Locations may carry FastAPI's leading "body" segment. Errors about the
    body as a whole (invalid JSON, not an object, missing) collapse into a
    single entry with an empty param.
    """
    result: List[FieldError] = []
    body_reported = False

    for error in errors:
        loc = tuple(error.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]

        if error.get("type") == "json_invalid" or not loc:
            if not body_reported:
                result.append(FieldError(msg=BODY_NOT_OBJECT_MESSAGE, param=""))
                body_reported = True
            continue

        param = str(loc[0])
        if error.get("type") == RULE_ERROR_TYPE:
            messages = error["ctx"]["messages"]
        else:
            messages = [error.get("msg", "Invalid value")]
        result.extend(FieldError(msg=msg, param=param) for msg in messages)

    return result
