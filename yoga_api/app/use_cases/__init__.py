"""
Application Use Cases

Business logic organized by domain:
- auth: login, registration, principal resolution
- users: account read and self-service deletion
- teachers: read-only teacher access
- sessions: session CRUD and participation
"""

from .auth import LoginUseCase, RegisterUseCase, LoadPrincipalUseCase
from .users import GetUserUseCase, DeleteUserUseCase
from .teachers import ListTeachersUseCase, GetTeacherUseCase
from .sessions import (
    ListSessionsUseCase,
    GetSessionUseCase,
    CreateSessionUseCase,
    UpdateSessionUseCase,
    DeleteSessionUseCase,
    ParticipateUseCase,
    UnparticipateUseCase,
)

__all__ = [
    # Auth
    "LoginUseCase",
    "RegisterUseCase",
    "LoadPrincipalUseCase",
    # Users
    "GetUserUseCase",
    "DeleteUserUseCase",
    # Teachers
    "ListTeachersUseCase",
    "GetTeacherUseCase",
    # Sessions
    "ListSessionsUseCase",
    "GetSessionUseCase",
    "CreateSessionUseCase",
    "UpdateSessionUseCase",
    "DeleteSessionUseCase",
    "ParticipateUseCase",
    "UnparticipateUseCase",
]
