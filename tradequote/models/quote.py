"""
Quote model with status lifecycle
"""

from sqlmodel import Field, SQLModel
from sqlalchemy import Column, DateTime, JSON
from sqlalchemy.dialects.postgresql import JSONB
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
import uuid

from tradequote.core.config import get_settings
from tradequote.core.timestamps import utcnow

settings = get_settings()


class QuoteStatus(str, Enum):
    """Status of a customer quote"""
    DRAFT = "draft"             # Being prepared
    SENT = "sent"               # Sent to the customer
    ACCEPTED = "accepted"       # Customer accepted
    REJECTED = "rejected"       # Customer declined
    EXPIRED = "expired"         # Validity window passed


# Allowed moves when transition checking is switched on
QUOTE_STATUS_TRANSITIONS: dict[QuoteStatus, frozenset[QuoteStatus]] = {
    QuoteStatus.DRAFT: frozenset({QuoteStatus.SENT, QuoteStatus.EXPIRED}),
    QuoteStatus.SENT: frozenset({
        QuoteStatus.ACCEPTED, QuoteStatus.REJECTED, QuoteStatus.EXPIRED, QuoteStatus.DRAFT,
    }),
    QuoteStatus.ACCEPTED: frozenset(),
    QuoteStatus.REJECTED: frozenset({QuoteStatus.DRAFT}),
    QuoteStatus.EXPIRED: frozenset({QuoteStatus.DRAFT}),
}


def default_valid_until() -> date:
    return date.today() + timedelta(days=settings.QUOTE_VALIDITY_DAYS)


class Quote(SQLModel, table=True):
    """Customer price quote owned by a company"""

    __tablename__ = "quotes"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    company_id: uuid.UUID = Field(foreign_key="companies.id", index=True, nullable=False)
    created_by: Optional[uuid.UUID] = Field(
        default=None,
        foreign_key="users.id",
        nullable=True,
        ondelete="SET NULL",
    )
    quote_reference: str = Field(unique=True, index=True, nullable=False, max_length=20)
    status: QuoteStatus = Field(default=QuoteStatus.DRAFT, index=True, nullable=False)

    # Customer snapshot
    customer_name: Optional[str] = Field(default=None, max_length=255)
    customer_email: Optional[str] = Field(default=None, max_length=255)
    customer_phone: Optional[str] = Field(default=None, max_length=20)
    customer_address: Optional[str] = None
    customer_postcode: Optional[str] = Field(default=None, max_length=10)

    # Material
    material_name: Optional[str] = Field(default=None, max_length=255)
    material_brand: Optional[str] = Field(default=None, max_length=255)
    thickness: Optional[int] = None
    edge_profile: Optional[str] = Field(default=None, max_length=50)
    slabs_required: Optional[int] = Field(default=1)

    # Pricing
    trade_price_ex_vat: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    trade_price_inc_vat: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    customer_price_ex_vat: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    customer_price_inc_vat: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)

    # Line-item detail
    quote_data: Optional[Any] = Field(
        default=None,
        sa_column=Column(JSON().with_variant(JSONB(), "postgresql")),
    )

    valid_until: date = Field(default_factory=default_valid_until)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), index=True)
    updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    def can_transition_to(self, new_status: QuoteStatus, enforce: bool = False) -> bool:
        """Check whether the quote may move to new_status"""
        if not enforce or new_status == self.status:
            return True
        return new_status in QUOTE_STATUS_TRANSITIONS[QuoteStatus(self.status)]

    def transition_to(self, new_status: QuoteStatus, enforce: bool = False) -> None:
        """Move the quote to new_status"""
        new_status = QuoteStatus(new_status)
        if not self.can_transition_to(new_status, enforce=enforce):
            raise ValueError(f"Cannot move quote from {QuoteStatus(self.status).value} to {new_status.value}")

        self.status = new_status
        self.updated_at = utcnow()
