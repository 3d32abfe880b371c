from fastapi import APIRouter, Depends, Response, status

from yoga_api.api.error import http_error
from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.app.use_cases.users import DeleteUserUseCase, GetUserUseCase, UserDto
from yoga_api.depends import get_current_principal, get_unit_of_work
from yoga_api.domain.entities import AuthenticatedPrincipal

router = APIRouter(prefix="/user", tags=["User"])


@router.get("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserDto)
async def find_by_id(
    user_id: int,
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get User

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 404 Not Found: No such user
        - 400 Bad Request: Non-numeric ID
    """
    result = await GetUserUseCase(uow).execute(user_id)

    if result.is_err():
        raise http_error(result.error)

    return result.value


@router.delete("/{user_id}", status_code=status.HTTP_200_OK)
async def delete(
    user_id: int,
    principal: AuthenticatedPrincipal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Own Account

    Only the owner of the account (token subject == account email,
    case-sensitive) can delete it.

    Raises:
        - 401 Unauthorized: Missing/invalid token, or not the account owner
        - 404 Not Found: No such user
        - 400 Bad Request: Non-numeric ID
    """
    use_case = DeleteUserUseCase(uow)
    result = await use_case.execute(user_id, principal.username)

    if result.is_err():
        raise http_error(result.error, {"NOT_OWNER": status.HTTP_401_UNAUTHORIZED})

    return Response(status_code=status.HTTP_200_OK)
