from abc import ABC, abstractmethod
from typing import Dict, Iterable, List


class IParticipationRepository(ABC):
    """Participation (session membership) repository interface - application layer"""

    @abstractmethod
    async def get_user_ids(self, session_id: int) -> List[int]:
        """Get IDs of users participating in a session"""
        pass

    @abstractmethod
    async def get_user_ids_by_session(
        self, session_ids: Iterable[int]
    ) -> Dict[int, List[int]]:
        """Get participant IDs for several sessions at once"""
        pass

    @abstractmethod
    async def add(self, session_id: int, user_id: int) -> None:
        """Add a user to a session"""
        pass

    @abstractmethod
    async def remove(self, session_id: int, user_id: int) -> None:
        """Remove a user from a session"""
        pass

    @abstractmethod
    async def replace(self, session_id: int, user_ids: Iterable[int]) -> None:
        """Replace the whole membership of a session"""
        pass

    @abstractmethod
    async def delete_by_session_id(self, session_id: int) -> int:
        """Remove every participation of a session. Returns count removed."""
        pass

    @abstractmethod
    async def delete_by_user_id(self, user_id: int) -> int:
        """Remove every participation of a user. Returns count removed."""
        pass
