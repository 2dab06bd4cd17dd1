"""
Authentication Use Cases
"""

from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .get_my_access_use_case import GetMyAccessUseCase

__all__ = [
    "LoginUseCase",
    "LogoutUseCase",
    "GetMyAccessUseCase",
]
