"""Validation rules for user payloads.

Pure functions with no side effects. Every rule runs independently and all
messages are returned together.
"""

import math
import re
from collections.abc import Mapping
from typing import Any

NAME_REQUIRED = "Name is required"
NAME_EMPTY = "Name cannot be empty"
NAME_NOT_STRING = "Name must be a string"
EMAIL_REQUIRED = "Email is required"
EMAIL_EMPTY = "Email cannot be empty"
EMAIL_NOT_STRING = "Email must be a string"
EMAIL_INVALID = "Invalid email format"
AGE_INVALID = "Age must be a positive number"

_LEADING_INT = re.compile(r'[+-]?\d+')


def parse_age(value: Any) -> int | None:
    """Parse an age value into an int.

    Accepts ints, finite floats (truncated toward zero) and strings that
    start with an optionally signed run of digits ("12abc" parses as 12).
    Returns None when nothing integral can be read.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value.strip())
        return int(match.group()) if match else None
    return None


def _check_text(value: Any, required: bool, missing: str, not_string: str, empty: str) -> str | None:
    if value is None or value == "":
        if required:
            return missing
        return empty if value == "" else None
    if not isinstance(value, str):
        return not_string
    if not value.strip():
        return empty
    return None


def validate_user_data(data: Mapping[str, Any], require_all: bool = True) -> list[str]:
    """Validate a user payload and return the list of error messages.

    Args:
        data: Payload with optional name, email and age keys
        require_all: True for creation (name and email mandatory),
            False for partial updates

    Returns:
        Error messages in the order name, email, age. Empty when valid.
    """
    errors = []

    name_error = _check_text(data.get("name"), require_all, NAME_REQUIRED, NAME_NOT_STRING, NAME_EMPTY)
    if name_error:
        errors.append(name_error)

    email = data.get("email")
    email_error = _check_text(email, require_all, EMAIL_REQUIRED, EMAIL_NOT_STRING, EMAIL_EMPTY)
    if email_error:
        errors.append(email_error)
    elif email is not None and "@" not in email:
        errors.append(EMAIL_INVALID)

    age = data.get("age")
    if age is not None:
        parsed = parse_age(age)
        if parsed is None or parsed < 0:
            errors.append(AGE_INVALID)

    return errors
