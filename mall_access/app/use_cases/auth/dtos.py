"""
Authentication Use Case DTOs (Data Transfer Objects)

All Response classes for the auth domain.
"""

from typing import List

from pydantic import BaseModel

from mall_access.app.use_cases.users.dtos import UserResponse, UserRoleInfo


class LoginResponse(BaseModel):
    """Response for admin login use case"""

    access_token: str
    token_type: str
    expires_in: int
    user: UserResponse


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    status: str
    message: str


class MyAccessResponse(BaseModel):
    """Roles and effective permission names of the signed-in user"""

    user_id: str
    email: str
    full_name: str
    roles: List[UserRoleInfo]
    permissions: List[str]
