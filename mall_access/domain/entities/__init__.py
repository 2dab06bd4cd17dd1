"""
Access Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    SYSTEM_ACTOR,
    ActivityAction,
    ActivityModule,
    UserStatusFilter,
)

# Export all entities
from .admin_user import AdminUser
from .role import AdminRole
from .permission import AdminPermission
from .user_role import AdminRolePermission, AdminUserRole
from .activity_log import ActivityLog

__all__ = [
    # Enums
    "ActivityAction",
    "ActivityModule",
    "UserStatusFilter",
    "SYSTEM_ACTOR",
    # Entities
    "AdminUser",
    "AdminRole",
    "AdminPermission",
    "AdminUserRole",
    "AdminRolePermission",
    "ActivityLog",
]
