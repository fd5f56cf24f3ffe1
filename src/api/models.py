"""Pydantic models for API responses."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from domain.model.user import User


class UserResponse(BaseModel):
    """Response model for a user."""
    id: str = Field(..., description="User ID")
    name: str
    email: str
    age: Optional[int] = Field(None, description="Age in years, null when not provided")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            age=user.age,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class MessageResponse(BaseModel):
    message: str
