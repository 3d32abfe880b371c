"""
Teacher Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from yoga_api.domain.entities import Teacher


class TeacherDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_entity(cls, teacher: Teacher) -> "TeacherDto":
        return cls(
            id=teacher.id,
            first_name=teacher.first_name,
            last_name=teacher.last_name,
            created_at=teacher.created_at,
            updated_at=teacher.updated_at,
        )
