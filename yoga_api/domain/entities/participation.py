"""
Participation Entity

Links a User to a Session they booked.
"""

from sqlmodel import Field, SQLModel


class Participation(SQLModel, table=True):
    """
    Participation entity - many-to-many link between sessions and users.

    Business Rules:
    - (session_id, user_id) is unique
    - Rows go away with either the session or the user
    """

    __tablename__ = "participate"

    session_id: int = Field(
        foreign_key="sessions.id", primary_key=True, ondelete="CASCADE"
    )
    user_id: int = Field(
        foreign_key="users.id", primary_key=True, index=True, ondelete="CASCADE"
    )
