"""
Authentication Use Cases

Login, registration and principal resolution.
"""

from .login_use_case import LoginUseCase
from .register_use_case import RegisterUseCase
from .load_principal_use_case import LoadPrincipalUseCase
from .dtos import LoginResponse, MessageResponse, SignupCommand

__all__ = [
    # Use Cases
    "LoginUseCase",
    "RegisterUseCase",
    "LoadPrincipalUseCase",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "LoginResponse",
    "MessageResponse",
]
