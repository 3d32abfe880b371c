from abc import ABC, abstractmethod
from typing import List, Optional

from yoga_api.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: int) -> Optional[Session]:
        """Get session by ID, None when absent"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Session]:
        """Get all sessions ordered by ID"""
        pass

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def update(self, session: Session) -> Session:
        """Update existing session"""
        pass

    @abstractmethod
    async def delete(self, session: Session) -> None:
        """Delete a session"""
        pass
