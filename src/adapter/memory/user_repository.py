"""Process-local implementation of UserRepository.

Every read and write holds one lock, so the email uniqueness check and the
mutation it guards happen as a single step.
"""

import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from domain.model.errors import DuplicateError, NotFoundError
from domain.model.user import User, UserUpdate

logger = logging.getLogger(__name__)

EMAIL_EXISTS = "Email already exists"
USER_NOT_FOUND = "User not found"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryUserRepository:
    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}
        self._ids_by_email: dict[str, str] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, name: str, email: str, age: int | None = None) -> User:
        with self._lock:
            if email in self._ids_by_email:
                raise DuplicateError(EMAIL_EXISTS)

            user = User.create(name=name, email=email, age=age, now=self._clock())
            self._users[user.id] = user
            self._ids_by_email[email] = user.id
            logger.debug("User stored", extra={"user_id": user.id, "total": len(self._users)})
            return replace(user)

    def update(self, user_id: str, changes: UserUpdate) -> User:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise NotFoundError(USER_NOT_FOUND)

            if changes.email is not None:
                owner = self._ids_by_email.get(changes.email)
                if owner is not None and owner != user_id:
                    raise DuplicateError(EMAIL_EXISTS)

            old_email = user.email
            user.apply_update(changes, now=self._clock())
            if user.email != old_email:
                del self._ids_by_email[old_email]
                self._ids_by_email[user.email] = user_id
            return replace(user)

    def delete(self, user_id: str) -> None:
        with self._lock:
            user = self._users.pop(user_id, None)
            if user is None:
                raise NotFoundError(USER_NOT_FOUND)
            del self._ids_by_email[user.email]

    # ── read operations ──────────────────────────────────────

    def list_all(self) -> list[User]:
        with self._lock:
            return [replace(u) for u in self._users.values()]

    def get_by_id(self, user_id: str) -> User | None:
        with self._lock:
            user = self._users.get(user_id)
            return replace(user) if user else None

    def count(self) -> int:
        with self._lock:
            return len(self._users)
