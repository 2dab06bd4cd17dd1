from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import urlparse
from uuid import UUID

from email_validator import EmailNotValidError, validate_email

from mall_access.domain.entities import AdminUser


def normalize_email(email: str) -> str:
    return email.strip().lower()


def email_violation(email: str) -> Optional[str]:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return "Invalid email address"
    return None


def full_name_violation(full_name: str) -> Optional[str]:
    if not 2 <= len(full_name.strip()) <= 100:
        return "Full name must be between 2 and 100 characters"
    return None


def avatar_url_violation(avatar_url: Optional[str]) -> Optional[str]:
    """Empty means no avatar; anything else must be an http(s) URL."""
    if not avatar_url:
        return None
    parsed = urlparse(avatar_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return "Avatar URL must be an http(s) URL"
    return None


def distinct_ids(ids: Sequence[UUID]) -> List[UUID]:
    return list(dict.fromkeys(ids))


def user_snapshot(user: AdminUser, role_ids: Sequence[UUID]) -> Dict[str, Any]:
    """Audited fields of a user. Never includes credentials."""
    return {
        "email": user.email,
        "full_name": user.full_name,
        "avatar_url": user.avatar_url,
        "is_active": user.is_active,
        "role_ids": sorted(str(r) for r in role_ids),
    }
