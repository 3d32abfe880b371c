from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email

from yoga_api.api.error import http_error
from yoga_api.api.utils.jwt import JwtTokenService
from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.app.use_cases.auth import (
    LoginResponse,
    LoginUseCase,
    MessageResponse,
    RegisterUseCase,
    SignupCommand,
)
from yoga_api.depends import get_token_service, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])

BCRYPT_MAX_PASSWORD_BYTES = 72


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Both fields must be non-blank.
    """

    email: str = Field(..., min_length=1, pattern=r"\S", description="User email address")
    password: str = Field(..., min_length=1, pattern=r"\S", description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: JwtTokenService = Depends(get_token_service),
):
    """
    User Login

    Authenticates the user and returns a bearer token with the account details.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 400 Bad Request: Missing or blank fields
    """
    use_case = LoginUseCase(uow, tokens)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise http_error(
            result.error, {"INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED}
        )

    return result.value


class SignupRequest(BaseModel):
    """
    Registration HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., max_length=50, description="User email address")
    first_name: str = Field(..., alias="firstName", min_length=3, max_length=20)
    last_name: str = Field(..., alias="lastName", min_length=3, max_length=20)
    password: str = Field(..., min_length=6, max_length=40, description="User password")

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        # Validate the address but store it exactly as typed
        validate_email(value)
        return value

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        # bcrypt only accepts secrets up to 72 bytes
        if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(
                f"password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes"
            )
        return value


@router.post("/register", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def register(
    request: SignupRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    User Registration

    Creates a non-admin account.

    Raises:
        - 400 Bad Request: Email already taken, or invalid fields
    """
    command = SignupCommand(
        email=request.email,
        first_name=request.first_name,
        last_name=request.last_name,
        password=request.password,
    )

    use_case = RegisterUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise http_error(
            result.error, {"EMAIL_ALREADY_EXISTS": status.HTTP_400_BAD_REQUEST}
        )

    return result.value
