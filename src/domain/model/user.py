import uuid
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserUpdate:
    """Partial update for a user. None means the field was not provided."""
    name: str | None = None
    email: str | None = None
    age: int | None = None

    def is_empty(self) -> bool:
        return self.name is None and self.email is None and self.age is None


@dataclass
class User:
    """Domain model representing a user."""
    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
    age: int | None = None

    @staticmethod
    def create(name: str, email: str, now: datetime, age: int | None = None) -> 'User':
        """Build a new user with a fresh id and both timestamps set to ``now``."""
        return User(
            id=str(uuid.uuid4()),
            name=name,
            email=email,
            age=age,
            created_at=now,
            updated_at=now,
        )

    def apply_update(self, changes: UserUpdate, now: datetime) -> None:
        """Overwrite supplied fields and refresh updated_at."""
        if changes.name is not None:
            self.name = changes.name
        if changes.email is not None:
            self.email = changes.email
        if changes.age is not None:
            self.age = changes.age
        # Clock skew must not break updated_at >= created_at
        self.updated_at = max(now, self.created_at)
