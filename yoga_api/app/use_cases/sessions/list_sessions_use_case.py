from typing import List

from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.libs.result import Result, Return
from .dtos import SessionDto


class ListSessionsUseCase:
    """Use case for listing every session with its participants"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[SessionDto]]:
        async with self.uow:
            sessions = await self.uow.sessions.list_all()
            members = await self.uow.participations.get_user_ids_by_session(
                s.id for s in sessions
            )
            return Return.ok(
                [SessionDto.from_entity(s, members.get(s.id, [])) for s in sessions]
            )
