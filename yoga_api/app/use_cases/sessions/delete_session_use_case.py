from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.libs.result import Error, Result, Return


class DeleteSessionUseCase:
    """Use case for deleting a session and its participations"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: int) -> Result[None]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            await self.uow.participations.delete_by_session_id(session_id)
            await self.uow.sessions.delete(session)

            await self.uow.commit()

            return Return.ok(None)
