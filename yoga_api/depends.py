import logging
from typing import Optional

from fastapi import Depends, Request, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from yoga_api.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from yoga_api.api.error import ClientError
from yoga_api.api.utils.jwt import JwtTokenService, token_service
from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.app.use_cases.auth import LoadPrincipalUseCase
from yoga_api.domain.entities import AuthenticatedPrincipal
from yoga_api.libs.result import Error

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_service() -> JwtTokenService:
    return token_service


async def authenticate_request(
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: JwtTokenService = Depends(get_token_service),
) -> Optional[AuthenticatedPrincipal]:
    """
    Resolve the bearer token of a request into a principal.

    Never rejects the request: a missing, malformed, expired or foreign
    token, or a subject that no longer exists, all yield None. Rejection is
    left to get_current_principal on protected routes.

    Returns:
        The authenticated principal, or None for an anonymous request
    """
    header = request.headers.get("Authorization")
    if not header or not header.startswith(BEARER_PREFIX):
        return None

    try:
        token = header[len(BEARER_PREFIX):]
        if not token:
            return None

        if not tokens.verify(token):
            return None

        email = tokens.extract_subject(token)
        result = await LoadPrincipalUseCase(uow).execute(email)
        if result.is_err():
            logger.info(f"Token subject could not be resolved: {result.error.code}")
            return None

        return result.value
    except Exception as exc:
        logger.warning(f"Cannot set user authentication: {exc!r}")
        return None


async def get_current_principal(
    principal: Optional[AuthenticatedPrincipal] = Depends(authenticate_request),
) -> AuthenticatedPrincipal:
    """
    Dependency guarding protected routes.

    Raises:
        ClientError: 401 whatever the reason authentication did not happen
    """
    if principal is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Full authentication is required to access this resource"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return principal
