"""
User Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from yoga_api.domain.entities import User


class UserDto(BaseModel):
    """Public view of a user - never carries the password"""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    email: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    admin: bool
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_entity(cls, user: User) -> "UserDto":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            admin=user.admin,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
