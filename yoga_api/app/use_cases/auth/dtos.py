"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Field aliases give the camelCase JSON the web client expects.
"""

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Command DTOs
# ============================================================================


class SignupCommand(BaseModel):
    """
    Signup command - represents validated registration intent

    Created by API layer after request validation passes.
    """

    email: str
    first_name: str
    last_name: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for user login use case"""

    model_config = ConfigDict(populate_by_name=True)

    token: str
    type: str = "Bearer"
    id: int
    username: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    admin: bool


class MessageResponse(BaseModel):
    """Plain message response"""

    message: str
