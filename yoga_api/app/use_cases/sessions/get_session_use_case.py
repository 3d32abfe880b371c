from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.libs.result import Error, Result, Return
from .dtos import SessionDto


class GetSessionUseCase:
    """Use case for reading a single session"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: int) -> Result[SessionDto]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            user_ids = await self.uow.participations.get_user_ids(session_id)
            return Return.ok(SessionDto.from_entity(session, user_ids))
