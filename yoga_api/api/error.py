from typing import Dict, Optional

from fastapi import status
from yoga_api.libs.result import Error

# Error codes shared by every route; routes can override or extend them
DEFAULT_ERROR_STATUSES: Dict[str, int] = {
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "SESSION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "TEACHER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def http_error(
    error: Error, statuses: Optional[Dict[str, int]] = None
) -> Exception:
    """
    Map a use case error to the exception the API layer raises.

    Codes missing from both the route's statuses and the defaults become
    a ServerError (500, message hidden from the client).
    """
    mapping = {**DEFAULT_ERROR_STATUSES, **(statuses or {})}
    status_code = mapping.get(error.code)
    if status_code is None:
        return ServerError(error)
    return ClientError(error, status_code=status_code)
