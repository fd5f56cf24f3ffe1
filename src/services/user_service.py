"""User service — CRUD business logic for the user collection.

Pure business logic with no HTTP dependencies.
Raises domain errors that the API layer maps to HTTP status codes.
"""

import logging
from collections.abc import Mapping
from typing import Any

from domain.model.errors import NotFoundError, ValidationError
from domain.model.user import User, UserUpdate
from port.user_repository import UserRepository
from services.user_validation import parse_age, validate_user_data

logger = logging.getLogger(__name__)


def _age_or_none(data: Mapping[str, Any]) -> int | None:
    age = data.get("age")
    return parse_age(age) if age is not None else None


def create_user(repo: UserRepository, data: Mapping[str, Any]) -> User:
    """Validate a creation payload and store the new user.

    Raises:
        ValidationError: payload breaks one or more rules
        DuplicateError: email already used by another user
    """
    errors = validate_user_data(data, require_all=True)
    if errors:
        raise ValidationError(errors)

    user = repo.create(name=data["name"], email=data["email"], age=_age_or_none(data))
    logger.info("User created", extra={"user_id": user.id, "email": user.email})
    return user


def list_users(repo: UserRepository) -> list[User]:
    return repo.list_all()


def get_user(repo: UserRepository, user_id: str) -> User:
    """Raises NotFoundError if the user does not exist."""
    user = repo.get_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def update_user(repo: UserRepository, user_id: str, data: Mapping[str, Any]) -> User:
    """Apply a partial update. Only non-null fields in ``data`` are changed.

    Raises:
        ValidationError: payload breaks one or more rules
        NotFoundError: user does not exist
        DuplicateError: new email already used by another user
    """
    errors = validate_user_data(data, require_all=False)
    if errors:
        raise ValidationError(errors)

    changes = UserUpdate(
        name=data.get("name"),
        email=data.get("email"),
        age=_age_or_none(data),
    )
    if changes.is_empty():
        logger.debug("Update has no known fields, refreshing timestamp only", extra={"user_id": user_id})
    user = repo.update(user_id, changes)
    logger.info("User updated", extra={"user_id": user_id})
    return user


def delete_user(repo: UserRepository, user_id: str) -> None:
    """Raises NotFoundError if the user does not exist."""
    repo.delete(user_id)
    logger.info("User deleted", extra={"user_id": user_id})
