import bcrypt
import pytest
from sqlalchemy.exc import IntegrityError

from yoga_api.app.use_cases.auth import RegisterUseCase, SignupCommand


def signup_command(**overrides):
    data = {
        "email": "newuser@example.com",
        "first_name": "Jane",
        "last_name": "Smith",
        "password": "password123",
    }
    data.update(overrides)
    return SignupCommand(**data)


@pytest.mark.asyncio
async def test_successful_registration(mock_uow):
    # Act
    result = await RegisterUseCase(mock_uow).execute(signup_command())

    # Assert
    assert result.is_ok()
    assert result.value.message == "User registered successfully!"

    mock_uow.users.exists_by_email.assert_called_once_with("newuser@example.com")
    mock_uow.users.create.assert_called_once()
    mock_uow.commit.assert_called_once()

    created = mock_uow.users.create.call_args.args[0]
    assert created.email == "newuser@example.com"
    assert created.first_name == "Jane"
    assert created.last_name == "Smith"
    assert created.admin is False


@pytest.mark.asyncio
async def test_registration_stores_bcrypt_hash_not_plaintext(mock_uow):
    await RegisterUseCase(mock_uow).execute(signup_command(password="password123"))

    created = mock_uow.users.create.call_args.args[0]
    assert created.password != "password123"
    assert bcrypt.checkpw(b"password123", created.password.encode())


@pytest.mark.asyncio
async def test_registration_email_already_taken(mock_uow):
    mock_uow.users.exists_by_email.return_value = True

    result = await RegisterUseCase(mock_uow).execute(signup_command())

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    assert result.error.message == "Error: Email is already taken!"
    mock_uow.users.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_registration_losing_unique_email_race(mock_uow):
    # Arrange: the pre-check passes but the insert hits the unique index
    mock_uow.users.create.side_effect = IntegrityError(
        "INSERT INTO users", {}, Exception("UNIQUE constraint failed: users.email")
    )

    # Act
    result = await RegisterUseCase(mock_uow).execute(signup_command())

    # Assert
    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    assert result.error.message == "Error: Email is already taken!"
    mock_uow.commit.assert_not_called()
