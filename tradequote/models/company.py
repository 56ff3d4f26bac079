"""
Company model - the tenant root
"""

from sqlmodel import Field, SQLModel
from sqlalchemy import DateTime
from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Optional
import uuid

from tradequote.core.config import get_settings
from tradequote.core.timestamps import utcnow

settings = get_settings()


class AccountStatus(str, Enum):
    """Billing state of a company account"""
    TRIAL = "trial"
    ACTIVE = "active"
    SUSPENDED = "suspended"


def default_trial_end() -> datetime:
    return utcnow() + timedelta(days=settings.TRIAL_PERIOD_DAYS)


class Company(SQLModel, table=True):
    """Trade business registered on the platform"""

    __tablename__ = "companies"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    company_name: str = Field(nullable=False, max_length=255)
    email: str = Field(unique=True, index=True, nullable=False, max_length=255)

    # Contact details
    phone: Optional[str] = Field(default=None, max_length=20)
    address_line1: Optional[str] = Field(default=None, max_length=255)
    address_line2: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=100)
    postcode: Optional[str] = Field(default=None, max_length=10)
    vat_number: Optional[str] = Field(default=None, max_length=20)

    # Account
    account_status: AccountStatus = Field(default=AccountStatus.TRIAL, nullable=False)
    trial_ends_at: Optional[datetime] = Field(default_factory=default_trial_end, sa_type=DateTime(timezone=True))
    markup_percentage: Decimal = Field(
        default=settings.DEFAULT_MARKUP_PERCENTAGE,
        max_digits=5,
        decimal_places=2,
        description="Customer price markup over trade price",
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
