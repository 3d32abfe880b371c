"""
Unparticipate Use Case

Cancels a user's booking in a session.
"""

from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.libs.result import Error, Result, Return


class UnparticipateUseCase:
    """
    Use case for removing a user from a session.

    Business Rules:
    - Session must exist (SESSION_NOT_FOUND)
    - User must currently participate (NOT_PARTICIPATING)
    - The user record itself is not looked up
    - Other participants are left untouched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: int, user_id: int) -> Result[None]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            participants = await self.uow.participations.get_user_ids(session_id)
            if user_id not in participants:
                return Return.err(
                    Error(
                        "NOT_PARTICIPATING",
                        "User does not participate in this session",
                    )
                )

            await self.uow.participations.remove(session_id, user_id)

            await self.uow.commit()

            return Return.ok(None)
