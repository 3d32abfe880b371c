from typing import Dict, Iterable, List

from sqlalchemy import delete, insert
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from yoga_api.app.repositories.participation_repository import IParticipationRepository
from yoga_api.domain.entities import Participation


class ParticipationRepository(IParticipationRepository):
    """Participation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_user_ids(self, session_id: int) -> List[int]:
        """Get IDs of users participating in a session"""
        stmt = select(Participation.user_id).where(
            Participation.session_id == session_id
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_user_ids_by_session(
        self, session_ids: Iterable[int]
    ) -> Dict[int, List[int]]:
        """Get participant IDs for several sessions in one query"""
        session_ids = list(session_ids)
        members: Dict[int, List[int]] = {session_id: [] for session_id in session_ids}
        if not session_ids:
            return members

        stmt = select(Participation.session_id, Participation.user_id).where(
            Participation.session_id.in_(session_ids)
        )
        result = await self.session.exec(stmt)
        for session_id, user_id in result.all():
            members[session_id].append(user_id)
        return members

    async def add(self, session_id: int, user_id: int) -> None:
        """Add a user to a session"""
        stmt = insert(Participation).values(session_id=session_id, user_id=user_id)
        await self.session.execute(stmt)

    async def remove(self, session_id: int, user_id: int) -> None:
        """Remove a user from a session"""
        stmt = delete(Participation).where(
            Participation.session_id == session_id,
            Participation.user_id == user_id,
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def replace(self, session_id: int, user_ids: Iterable[int]) -> None:
        """Replace the whole membership of a session"""
        await self.delete_by_session_id(session_id)
        rows = [
            {"session_id": session_id, "user_id": user_id}
            for user_id in dict.fromkeys(user_ids)
        ]
        if rows:
            await self.session.execute(insert(Participation), rows)

    async def delete_by_session_id(self, session_id: int) -> int:
        stmt = delete(Participation).where(Participation.session_id == session_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_by_user_id(self, user_id: int) -> int:
        stmt = delete(Participation).where(Participation.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
