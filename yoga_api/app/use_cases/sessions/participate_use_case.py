"""
Participate Use Case

Books a user into a session.
"""

from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.libs.result import Error, Result, Return


class ParticipateUseCase:
    """
    Use case for adding a user to a session.

    Business Rules:
    - Session must exist (SESSION_NOT_FOUND)
    - User must exist (USER_NOT_FOUND)
    - User must not already participate (ALREADY_PARTICIPATING)
    - Not idempotent: a repeated call fails
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: int, user_id: int) -> Result[None]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            participants = await self.uow.participations.get_user_ids(session_id)
            if user.id in participants:
                return Return.err(
                    Error(
                        "ALREADY_PARTICIPATING",
                        "User already participates in this session",
                    )
                )

            await self.uow.participations.add(session_id, user.id)

            await self.uow.commit()

            return Return.ok(None)
