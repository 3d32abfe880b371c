"""
Session Entity

A scheduled yoga session led by a teacher.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from yoga_api.domain.base import utcnow


class Session(SQLModel, table=True):
    """
    Session entity - a yoga class users can participate in.

    Business Rules:
    - teacher_id must reference an existing teacher when written
    - Participants are stored in the participate link table
    """

    __tablename__ = "sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=50)
    date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    description: str = Field(max_length=2500)

    teacher_id: Optional[int] = Field(
        default=None, foreign_key="teachers.id", index=True
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
