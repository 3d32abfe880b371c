from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from yoga_api.app.repositories.teacher_repository import ITeacherRepository
from yoga_api.domain.entities import Teacher


class TeacherRepository(ITeacherRepository):
    """Teacher repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        """Get teacher by ID"""
        stmt = select(Teacher).where(Teacher.id == teacher_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Teacher]:
        """Get all teachers"""
        stmt = select(Teacher).order_by(Teacher.id)
        result = await self.session.exec(stmt)
        return list(result.all())
