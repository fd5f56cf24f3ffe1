from typing import Protocol
from domain.model.user import User, UserUpdate


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Implementations enforce email uniqueness at the moment of mutation.
    """
    def create(self, name: str, email: str, age: int | None = None) -> User:
        """Insert a new user. Raise DuplicateError if the email is taken."""
        ...

    def list_all(self) -> list[User]:
        """Return every stored user in insertion order."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def update(self, user_id: str, changes: UserUpdate) -> User:
        """Apply a partial update.

        Raise NotFoundError if the user is absent, DuplicateError if the new
        email belongs to another user.
        """
        ...

    def delete(self, user_id: str) -> None:
        """Remove a user. Raise NotFoundError if absent."""
        ...

    def count(self) -> int:
        """Return the number of stored users."""
        ...
