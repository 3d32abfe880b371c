from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.domain.entities import Session
from yoga_api.libs.result import Error, Result, Return
from .dtos import SessionCommand, SessionDto


class CreateSessionUseCase:
    """
    Create Session Use Case

    Business Logic:
    1. Teacher must exist
    2. Create the Session
    3. Register the listed participants (unknown user IDs are ignored)
    4. Commit
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SessionCommand) -> Result[SessionDto]:
        async with self.uow:
            teacher = await self.uow.teachers.get_by_id(command.teacher_id)
            if teacher is None:
                return Return.err(Error("TEACHER_NOT_FOUND", "Teacher not found"))

            session = Session(
                name=command.name,
                date=command.date,
                description=command.description,
                teacher_id=teacher.id,
            )
            session = await self.uow.sessions.create(session)

            user_ids = []
            if command.users:
                user_ids = await self.uow.users.get_existing_ids(command.users)
                await self.uow.participations.replace(session.id, user_ids)

            await self.uow.commit()

            return Return.ok(SessionDto.from_entity(session, list(set(user_ids))))
