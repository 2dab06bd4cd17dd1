import re
from typing import Any, Dict, List, Optional
from uuid import UUID

from mall_access.domain.entities import AdminRole

ROLE_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")
COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


def role_fields_violation(
    name: Optional[str] = None,
    display_name: Optional[str] = None,
    description: Optional[str] = None,
    color: Optional[str] = None,
) -> Optional[str]:
    """Message for the first invalid field, None when all given fields are valid."""
    if name is not None:
        if not 2 <= len(name) <= 50:
            return "Role name must be between 2 and 50 characters"
        if not ROLE_NAME_PATTERN.match(name):
            return "Role name must start with a letter and contain only letters, numbers and underscores"
    if display_name is not None and not 2 <= len(display_name) <= 100:
        return "Display name must be between 2 and 100 characters"
    if description is not None and len(description) > 500:
        return "Description must be at most 500 characters"
    if color is not None and not COLOR_PATTERN.match(color):
        return "Color must be a hex value like #6366f1"
    return None


def role_snapshot(role: AdminRole, permission_ids: List[UUID]) -> Dict[str, Any]:
    """Audited fields of a role"""
    return {
        "name": role.name,
        "display_name": role.display_name,
        "description": role.description,
        "color": role.color,
        "is_active": role.is_active,
        "permission_ids": sorted(str(p) for p in permission_ids),
    }
