"""
Permission Catalog Use Cases
"""

from .list_permissions_use_case import ListPermissionsUseCase
from .create_permission_use_case import CreatePermissionUseCase
from .set_permission_status_use_case import SetPermissionStatusUseCase

__all__ = [
    "ListPermissionsUseCase",
    "CreatePermissionUseCase",
    "SetPermissionStatusUseCase",
]
