"""
Login Use Case

Checks credentials and issues a bearer token.
"""

from typing import Optional

from yoga_api.api.utils.jwt import JwtTokenService, token_service
from yoga_api.api.utils.password import verify_dummy_password, verify_password
from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.domain.entities import AuthenticatedPrincipal
from yoga_api.libs.result import Error, Result, Return
from .dtos import LoginResponse


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Email lookup is exact (case-sensitive)
    - Unknown email and wrong password give the same error
    - Password check runs even for unknown emails to keep timing flat
    - Token subject is the user's email
    """

    def __init__(self, uow: UnitOfWork, tokens: Optional[JwtTokenService] = None):
        self.uow = uow
        self.tokens = tokens or token_service

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the token and user info, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                verify_dummy_password(password)
                return Return.err(Error("INVALID_CREDENTIALS", "Bad credentials"))

            if not verify_password(password, user.password):
                return Return.err(Error("INVALID_CREDENTIALS", "Bad credentials"))

            principal = AuthenticatedPrincipal.from_user(user)

        token = self.tokens.issue(principal)

        return Return.ok(
            LoginResponse(
                token=token,
                id=principal.id,
                username=principal.username,
                first_name=principal.first_name,
                last_name=principal.last_name,
                admin=principal.admin,
            )
        )
