from abc import ABC, abstractmethod
from typing import List, Optional

from yoga_api.domain.entities import Teacher


class ITeacherRepository(ABC):
    """Teacher repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        """Get teacher by ID, None when absent"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Teacher]:
        """Get all teachers"""
        pass
