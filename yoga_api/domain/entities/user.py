"""
User Entity

Represents a registered member of the yoga studio.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from yoga_api.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - an account that can book yoga sessions.

    Business Rules:
    - Email must be unique across all users (compared case-sensitively)
    - Password stored as bcrypt hash, never as plain text
    - Deleting a user removes their session participations
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=50)
    first_name: str = Field(max_length=20)
    last_name: str = Field(max_length=20)
    password: str = Field(max_length=120)
    admin: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
