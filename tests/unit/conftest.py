import bcrypt
import pytest
from unittest.mock import AsyncMock, MagicMock

from yoga_api.domain.entities import User


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.exists_by_email = AsyncMock(return_value=False)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.delete = AsyncMock()
    uow.users.get_existing_ids = AsyncMock(return_value=[])

    uow.teachers = MagicMock()
    uow.teachers.get_by_id = AsyncMock(return_value=None)
    uow.teachers.list_all = AsyncMock(return_value=[])

    uow.sessions = MagicMock()
    uow.sessions.get_by_id = AsyncMock(return_value=None)
    uow.sessions.list_all = AsyncMock(return_value=[])
    uow.sessions.create = AsyncMock()
    uow.sessions.update = AsyncMock(side_effect=lambda session: session)
    uow.sessions.delete = AsyncMock()

    uow.participations = MagicMock()
    uow.participations.get_user_ids = AsyncMock(return_value=[])
    uow.participations.get_user_ids_by_session = AsyncMock(return_value={})
    uow.participations.add = AsyncMock()
    uow.participations.remove = AsyncMock()
    uow.participations.replace = AsyncMock()
    uow.participations.delete_by_session_id = AsyncMock(return_value=0)
    uow.participations.delete_by_user_id = AsyncMock(return_value=0)

    return uow


@pytest.fixture
def make_user():
    """Build a User entity with a real (cheap) bcrypt hash"""

    def _make_user(
        id=1,
        email="yoga@studio.com",
        password="test!1234",
        first_name="Admin",
        last_name="Admin",
        admin=False,
    ):
        return User(
            id=id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            password=bcrypt.hashpw(password.encode(), bcrypt.gensalt(4)).decode(),
            admin=admin,
        )

    return _make_user
