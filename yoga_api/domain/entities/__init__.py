"""
Yoga Studio Domain Entities

Each entity in its own file.
"""

from .user import User
from .teacher import Teacher
from .session import Session
from .participation import Participation
from .principal import AuthenticatedPrincipal

__all__ = [
    # Tables
    "User",
    "Teacher",
    "Session",
    "Participation",
    # Request-scoped
    "AuthenticatedPrincipal",
]
