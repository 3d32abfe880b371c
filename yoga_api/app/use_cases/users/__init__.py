"""
User Management Use Cases

All user-related business logic.
"""

from .get_user_use_case import GetUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .dtos import UserDto

__all__ = [
    "GetUserUseCase",
    "DeleteUserUseCase",
    "UserDto",
]
