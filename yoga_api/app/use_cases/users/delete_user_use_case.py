"""
Delete User Use Case

Self-service account removal.
"""

from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.libs.result import Error, Result, Return


class DeleteUserUseCase:
    """
    Use case for deleting one's own account.

    Business Rules:
    - Only the account owner may delete it
    - Ownership means principal username == user email, compared
      case-sensitively ("TEST@EXAMPLE.COM" does not own "test@example.com")
    - Session participations of the user are removed with it
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, requester_username: str) -> Result[None]:
        """
        Execute delete user use case.

        Args:
            user_id: ID of the account to delete
            requester_username: Username (email) of the authenticated principal

        Returns:
            Result with None, or Error(USER_NOT_FOUND | NOT_OWNER)
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if requester_username != user.email:
                return Return.err(
                    Error("NOT_OWNER", "You can only delete your own account")
                )

            await self.uow.participations.delete_by_user_id(user_id)
            await self.uow.users.delete(user)

            await self.uow.commit()

            return Return.ok(None)
