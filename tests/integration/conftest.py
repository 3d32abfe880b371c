from datetime import datetime
from typing import Iterable, Optional

import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from yoga_api.depends import get_unit_of_work
from yoga_api.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from yoga_api.api.utils.jwt import token_service
from yoga_api.api.utils.password import hash_password
from yoga_api.domain.entities import (
    AuthenticatedPrincipal,
    Participation,
    Session,
    Teacher,
    User,
)


class Seeder:
    """Inserts rows straight into the test database and hands back their IDs"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def user(
        self,
        email: str,
        password: str,
        first_name: str = "Yoga",
        last_name: str = "Member",
        admin: bool = False,
    ) -> int:
        user = User(
            email=email,
            first_name=first_name,
            last_name=last_name,
            password=hash_password(password),
            admin=admin,
        )
        self.session.add(user)
        await self.session.commit()
        return user.id

    async def teacher(self, first_name: str, last_name: str) -> int:
        teacher = Teacher(first_name=first_name, last_name=last_name)
        self.session.add(teacher)
        await self.session.commit()
        return teacher.id

    async def yoga_session(
        self,
        teacher_id: int,
        name: str = "Morning Flow",
        date: Optional[datetime] = None,
        description: str = "Gentle vinyasa",
        user_ids: Iterable[int] = (),
    ) -> int:
        session = Session(
            name=name,
            date=date or datetime(2026, 1, 15, 9, 0),
            description=description,
            teacher_id=teacher_id,
        )
        self.session.add(session)
        await self.session.flush()
        session_id = session.id

        rows = [{"session_id": session_id, "user_id": user_id} for user_id in user_ids]
        if rows:
            await self.session.execute(insert(Participation), rows)
        await self.session.commit()
        return session_id


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def seed(db_session):
    return Seeder(db_session)


@pytest_asyncio.fixture
def auth_headers():
    """Build an Authorization header carrying a valid token for an email"""

    def _auth_headers(email: str) -> dict:
        principal = AuthenticatedPrincipal(
            id=0, username=email, first_name="", last_name=""
        )
        return {"Authorization": f"Bearer {token_service.issue(principal)}"}

    return _auth_headers


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from yoga_api.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
