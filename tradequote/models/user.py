"""
User model with roles and company scoping
"""

from sqlmodel import Field, SQLModel
from sqlalchemy import DateTime
from datetime import datetime
from enum import Enum
from typing import Optional
import uuid

from tradequote.core.timestamps import utcnow


class UserRole(str, Enum):
    """Flat roles within a company"""
    TRADE_ADMIN = "trade_admin"
    TRADE_USER = "trade_user"


class User(SQLModel, table=True):
    """User belonging to exactly one company"""

    __tablename__ = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    company_id: uuid.UUID = Field(foreign_key="companies.id", index=True, nullable=False)

    # Authentication (email is unique across all companies)
    email: str = Field(unique=True, index=True, nullable=False, max_length=255)
    password_hash: str = Field(nullable=False, max_length=255)

    # Profile
    first_name: str = Field(nullable=False, max_length=100)
    last_name: str = Field(nullable=False, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=20)

    role: UserRole = Field(default=UserRole.TRADE_USER, nullable=False)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    last_login_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
