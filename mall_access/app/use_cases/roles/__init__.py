"""
Role Store Use Cases

All role-related business logic.
"""

from .create_role_use_case import CreateRoleUseCase
from .update_role_use_case import UpdateRoleUseCase
from .delete_role_use_case import DeleteRoleUseCase
from .get_role_use_case import GetRoleUseCase
from .list_roles_use_case import ListRolesUseCase
from .list_users_with_role_use_case import ListUsersWithRoleUseCase

__all__ = [
    "CreateRoleUseCase",
    "UpdateRoleUseCase",
    "DeleteRoleUseCase",
    "GetRoleUseCase",
    "ListRolesUseCase",
    "ListUsersWithRoleUseCase",
]
