from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.domain.base import utcnow
from yoga_api.libs.result import Error, Result, Return
from .dtos import SessionCommand, SessionDto


class UpdateSessionUseCase:
    """
    Update Session Use Case

    Business Logic:
    1. Session must exist
    2. Teacher must exist
    3. Overwrite name, date, description, teacher
    4. Replace participants when a user list is given
    5. Commit
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, session_id: int, command: SessionCommand
    ) -> Result[SessionDto]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            teacher = await self.uow.teachers.get_by_id(command.teacher_id)
            if teacher is None:
                return Return.err(Error("TEACHER_NOT_FOUND", "Teacher not found"))

            session.name = command.name
            session.date = command.date
            session.description = command.description
            session.teacher_id = teacher.id
            session.updated_at = utcnow()
            session = await self.uow.sessions.update(session)

            if command.users is not None:
                user_ids = await self.uow.users.get_existing_ids(command.users)
                await self.uow.participations.replace(session_id, user_ids)

            user_ids = await self.uow.participations.get_user_ids(session_id)

            await self.uow.commit()

            return Return.ok(SessionDto.from_entity(session, user_ids))
