from typing import Dict, NoReturn

from fastapi import status

from mall_access.api.error import ClientError, ServerError
from mall_access.libs.result import Error

# Use case error code -> HTTP status; unknown codes are server errors
STATUS_BY_CODE: Dict[str, int] = {
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "USER_DISABLED": status.HTTP_403_FORBIDDEN,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ROLE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PERMISSION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ACTIVITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "ROLE_NAME_EXISTS": status.HTTP_409_CONFLICT,
    "ROLE_IN_USE": status.HTTP_409_CONFLICT,
    "PERMISSION_EXISTS": status.HTTP_409_CONFLICT,
    "CANNOT_DELETE_SELF": status.HTTP_409_CONFLICT,
    "CANNOT_DEACTIVATE_SELF": status.HTTP_409_CONFLICT,
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_PASSWORD": status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def raise_for_error(error: Error) -> NoReturn:
    """Raise the API exception matching a use case error."""
    status_code = STATUS_BY_CODE.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
