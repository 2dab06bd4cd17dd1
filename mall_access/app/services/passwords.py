"""
Credential helpers: bcrypt hashing and temporary password generation.
"""

import re
import secrets
from typing import Optional

import bcrypt

from config import ApplicationConfig

# Excludes look-alikes: 0/O, 1/I/l
TEMP_PASSWORD_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZabcdefghjkmnpqrstuvwxyz23456789"
TEMP_PASSWORD_LENGTH = 12


def generate_temp_password(length: int = TEMP_PASSWORD_LENGTH) -> str:
    return "".join(secrets.choice(TEMP_PASSWORD_ALPHABET) for _ in range(length))


def hash_password(password: str) -> str:
    password_hash = bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    )
    return password_hash.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def burn_password_check() -> None:
    """Spend a hash check when the user is unknown, keeping login constant-time."""
    bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS))


def password_policy_violation(password: str) -> Optional[str]:
    """Message describing why password is too weak, None when acceptable."""
    if len(password) < 8:
        return "Password must be at least 8 characters"
    if not re.search(r"[A-Z]", password):
        return "Password must contain at least one uppercase letter"
    if not re.search(r"[a-z]", password):
        return "Password must contain at least one lowercase letter"
    if not re.search(r"\d", password):
        return "Password must contain at least one number"
    return None
