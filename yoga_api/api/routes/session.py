from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from yoga_api.api.error import http_error
from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.app.use_cases.sessions import (
    CreateSessionUseCase,
    DeleteSessionUseCase,
    GetSessionUseCase,
    ListSessionsUseCase,
    ParticipateUseCase,
    SessionCommand,
    SessionDto,
    UnparticipateUseCase,
    UpdateSessionUseCase,
)
from yoga_api.depends import get_current_principal, get_unit_of_work
from yoga_api.domain.base import to_naive_utc

router = APIRouter(
    prefix="/session",
    tags=["Session"],
    dependencies=[Depends(get_current_principal)],
)

# Writing a session with an unknown teacher is a bad request, not a 404
WRITE_ERROR_STATUSES = {"TEACHER_NOT_FOUND": status.HTTP_400_BAD_REQUEST}

PARTICIPATION_ERROR_STATUSES = {
    "ALREADY_PARTICIPATING": status.HTTP_400_BAD_REQUEST,
    "NOT_PARTICIPATING": status.HTTP_400_BAD_REQUEST,
}


class SessionRequest(BaseModel):
    """
    Session HTTP request payload for create and update

    users is optional; when present it replaces the participant list.
    Dates carrying an offset are stored as naive UTC.
    """

    name: str = Field(..., min_length=1, max_length=50, pattern=r"\S")
    date: datetime
    teacher_id: int
    description: str = Field(..., max_length=2500)
    users: Optional[List[int]] = None

    def to_command(self) -> SessionCommand:
        return SessionCommand(
            name=self.name,
            date=to_naive_utc(self.date),
            teacher_id=self.teacher_id,
            description=self.description,
            users=self.users,
        )


@router.get("", status_code=status.HTTP_200_OK, response_model=List[SessionDto])
async def find_all(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List all sessions with their participants"""
    result = await ListSessionsUseCase(uow).execute()

    if result.is_err():
        raise http_error(result.error)

    return result.value


@router.get("/{session_id}", status_code=status.HTTP_200_OK, response_model=SessionDto)
async def find_by_id(session_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get Session

    Raises:
        - 404 Not Found: No such session
        - 400 Bad Request: Non-numeric ID
    """
    result = await GetSessionUseCase(uow).execute(session_id)

    if result.is_err():
        raise http_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_200_OK, response_model=SessionDto)
async def create(request: SessionRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Create Session

    Raises:
        - 400 Bad Request: Invalid payload or unknown teacher
    """
    result = await CreateSessionUseCase(uow).execute(request.to_command())

    if result.is_err():
        raise http_error(result.error, WRITE_ERROR_STATUSES)

    return result.value


@router.put("/{session_id}", status_code=status.HTTP_200_OK, response_model=SessionDto)
async def update(
    session_id: int,
    request: SessionRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Session

    Raises:
        - 404 Not Found: No such session
        - 400 Bad Request: Non-numeric ID, invalid payload or unknown teacher
    """
    use_case = UpdateSessionUseCase(uow)
    result = await use_case.execute(session_id, request.to_command())

    if result.is_err():
        raise http_error(result.error, WRITE_ERROR_STATUSES)

    return result.value


@router.delete("/{session_id}", status_code=status.HTTP_200_OK)
async def delete(session_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Delete Session

    Raises:
        - 404 Not Found: No such session
        - 400 Bad Request: Non-numeric ID
    """
    result = await DeleteSessionUseCase(uow).execute(session_id)

    if result.is_err():
        raise http_error(result.error)

    return Response(status_code=status.HTTP_200_OK)


@router.post("/{session_id}/participate/{user_id}", status_code=status.HTTP_200_OK)
async def participate(
    session_id: int, user_id: int, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Book a user into a session

    Raises:
        - 404 Not Found: No such session or user
        - 400 Bad Request: Non-numeric IDs, or user already participates
    """
    result = await ParticipateUseCase(uow).execute(session_id, user_id)

    if result.is_err():
        raise http_error(result.error, PARTICIPATION_ERROR_STATUSES)

    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{session_id}/participate/{user_id}", status_code=status.HTTP_200_OK)
async def unparticipate(
    session_id: int, user_id: int, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Cancel a user's booking

    Raises:
        - 404 Not Found: No such session
        - 400 Bad Request: Non-numeric IDs, or user does not participate
    """
    result = await UnparticipateUseCase(uow).execute(session_id, user_id)

    if result.is_err():
        raise http_error(result.error, PARTICIPATION_ERROR_STATUSES)

    return Response(status_code=status.HTTP_200_OK)
