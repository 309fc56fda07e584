"""User schema definitions."""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from schemas.common import Role, UserStatus


class User(BaseModel):
    """A campus user, also used as the resolved actor of a request."""
    user_id: str
    name: str
    email: str
    role: Role
    department: Optional[str] = None
    club_name: Optional[str] = None
    phone: Optional[str] = None
    status: UserStatus = "active"
    last_active: Optional[str] = None
    created_at: str
    updated_at: str


class CreateUserRequest(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    role: Role
    department: Optional[str] = None
    club_name: Optional[str] = None
    phone: Optional[str] = None
    status: UserStatus = "active"


class UpdateUserRequest(BaseModel):
    """Partial update; role, status and email are admin-only."""
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    role: Optional[Role] = None
    department: Optional[str] = None
    club_name: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[UserStatus] = None


class AccessTokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
