"""
Session Use Cases

Session CRUD and participation bookkeeping.
"""

from .list_sessions_use_case import ListSessionsUseCase
from .get_session_use_case import GetSessionUseCase
from .create_session_use_case import CreateSessionUseCase
from .update_session_use_case import UpdateSessionUseCase
from .delete_session_use_case import DeleteSessionUseCase
from .participate_use_case import ParticipateUseCase
from .unparticipate_use_case import UnparticipateUseCase
from .dtos import SessionCommand, SessionDto

__all__ = [
    # Use Cases
    "ListSessionsUseCase",
    "GetSessionUseCase",
    "CreateSessionUseCase",
    "UpdateSessionUseCase",
    "DeleteSessionUseCase",
    "ParticipateUseCase",
    "UnparticipateUseCase",
    # DTOs
    "SessionCommand",
    "SessionDto",
]
