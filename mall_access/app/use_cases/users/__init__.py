"""
User Management Use Cases

All admin-user business logic, including role assignment.
"""

from .create_user_use_case import CreateUserUseCase
from .update_user_use_case import UpdateUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .toggle_user_status_use_case import ToggleUserStatusUseCase
from .set_user_roles_use_case import SetUserRolesUseCase
from .get_user_use_case import GetUserUseCase
from .list_users_use_case import ListUsersUseCase
from .reset_user_password_use_case import ResetUserPasswordUseCase
from .update_own_profile_use_case import UpdateOwnProfileUseCase
from .change_own_password_use_case import ChangeOwnPasswordUseCase

__all__ = [
    "CreateUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "ToggleUserStatusUseCase",
    "SetUserRolesUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "ResetUserPasswordUseCase",
    "UpdateOwnProfileUseCase",
    "ChangeOwnPasswordUseCase",
]
