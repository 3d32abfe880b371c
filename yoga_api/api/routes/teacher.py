from typing import List

from fastapi import APIRouter, Depends, status

from yoga_api.api.error import http_error
from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.app.use_cases.teachers import (
    GetTeacherUseCase,
    ListTeachersUseCase,
    TeacherDto,
)
from yoga_api.depends import get_current_principal, get_unit_of_work

router = APIRouter(
    prefix="/teacher",
    tags=["Teacher"],
    dependencies=[Depends(get_current_principal)],
)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[TeacherDto])
async def find_all(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List all teachers"""
    result = await ListTeachersUseCase(uow).execute()

    if result.is_err():
        raise http_error(result.error)

    return result.value


@router.get("/{teacher_id}", status_code=status.HTTP_200_OK, response_model=TeacherDto)
async def find_by_id(teacher_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get Teacher

    Raises:
        - 404 Not Found: No such teacher
        - 400 Bad Request: Non-numeric ID
    """
    result = await GetTeacherUseCase(uow).execute(teacher_id)

    if result.is_err():
        raise http_error(result.error)

    return result.value
