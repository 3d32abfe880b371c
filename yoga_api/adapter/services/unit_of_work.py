from sqlmodel.ext.asyncio.session import AsyncSession

from yoga_api.adapter.repositories.participation_repository import ParticipationRepository
from yoga_api.adapter.repositories.session_repository import SessionRepository
from yoga_api.adapter.repositories.teacher_repository import TeacherRepository
from yoga_api.adapter.repositories.user_repository import UserRepository
from yoga_api.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.teachers = TeacherRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.participations = ParticipationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
