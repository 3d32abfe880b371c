"""
Load Principal Use Case

Builds the authenticated principal for a token subject.
"""

from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.domain.entities import AuthenticatedPrincipal
from yoga_api.libs.result import Error, Result, Return


class LoadPrincipalUseCase:
    """
    Use case for resolving a token subject into a principal.

    Business Rules:
    - Subject is the user's email, matched exactly
    - User may have been deleted after the token was issued
    - Nothing is cached, the user row is read on every call
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str) -> Result[AuthenticatedPrincipal]:
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(
                    Error("USER_NOT_FOUND", f"User Not Found with email: {email}")
                )

            return Return.ok(AuthenticatedPrincipal.from_user(user))
