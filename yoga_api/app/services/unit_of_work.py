from abc import ABC, abstractmethod

from yoga_api.app.repositories.participation_repository import IParticipationRepository
from yoga_api.app.repositories.session_repository import ISessionRepository
from yoga_api.app.repositories.teacher_repository import ITeacherRepository
from yoga_api.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    teachers: ITeacherRepository
    sessions: ISessionRepository
    participations: IParticipationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
