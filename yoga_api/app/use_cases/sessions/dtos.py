"""
Session Use Case DTOs (Data Transfer Objects)

Command and Response classes for yoga sessions.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from yoga_api.domain.entities import Session


# ============================================================================
# Command DTOs
# ============================================================================


class SessionCommand(BaseModel):
    """
    Create/update session command

    users=None leaves the participants untouched on update,
    a list replaces them.
    """

    name: str
    date: datetime
    teacher_id: int
    description: str
    users: Optional[List[int]] = None


# ============================================================================
# Response DTOs
# ============================================================================


class SessionDto(BaseModel):
    """Session with its participants materialized as user IDs"""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    date: datetime
    teacher_id: Optional[int] = None
    description: str
    users: List[int] = Field(default_factory=list)
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_entity(cls, session: Session, user_ids: List[int]) -> "SessionDto":
        return cls(
            id=session.id,
            name=session.name,
            date=session.date,
            teacher_id=session.teacher_id,
            description=session.description,
            users=sorted(user_ids),
            created_at=session.created_at,
            updated_at=session.updated_at,
        )
