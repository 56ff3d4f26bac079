"""
Pydantic schemas for registration, login and the current user
"""

from datetime import datetime
from typing import Optional
import uuid

from pydantic import BaseModel, Field

from tradequote.models.company import AccountStatus
from tradequote.models.user import UserRole
from tradequote.schemas.common import CamelModel, Email


class RegisterRequest(CamelModel):
    """Company + first admin user registration"""
    company_name: str = Field(..., min_length=1, max_length=255)
    email: Email
    password: str = Field(..., min_length=8, max_length=72)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=20)
    postcode: Optional[str] = Field(default=None, max_length=10)


class LoginRequest(CamelModel):
    email: Email
    password: str = Field(..., min_length=1, max_length=72)


class AuthUser(CamelModel):
    first_name: str
    last_name: str
    email: str
    role: UserRole


class AuthCompany(CamelModel):
    id: uuid.UUID
    name: str
    status: Optional[AccountStatus] = None


class AuthResponse(CamelModel):
    """Token plus the identity it was issued for"""
    success: bool = True
    token: str
    user: AuthUser
    company: AuthCompany


class ProfileResponse(BaseModel):
    """Current user joined with their company"""
    id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    role: UserRole
    company_id: uuid.UUID
    company_name: str
    account_status: AccountStatus
    trial_ends_at: Optional[datetime] = None
