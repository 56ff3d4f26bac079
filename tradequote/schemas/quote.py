"""
Pydantic schemas for quotes
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional
import uuid

from pydantic import BaseModel, Field

from tradequote.models.quote import QuoteStatus
from tradequote.schemas.common import CamelModel

Price = Optional[Decimal]


class QuoteCreate(CamelModel):
    """Fields a caller supplies when creating a quote"""
    customer_name: Optional[str] = Field(default=None, max_length=255)
    customer_email: Optional[str] = Field(default=None, max_length=255)
    customer_phone: Optional[str] = Field(default=None, max_length=20)
    customer_address: Optional[str] = None
    customer_postcode: Optional[str] = Field(default=None, max_length=10)

    material_name: Optional[str] = Field(default=None, max_length=255)
    material_brand: Optional[str] = Field(default=None, max_length=255)
    thickness: Optional[int] = Field(default=None, ge=0)
    edge_profile: Optional[str] = Field(default=None, max_length=50)
    slabs_required: int = Field(default=1, ge=0)

    trade_price_ex_vat: Price = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    trade_price_inc_vat: Price = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    customer_price_ex_vat: Price = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    customer_price_inc_vat: Price = Field(default=None, ge=0, max_digits=10, decimal_places=2)

    quote_data: Optional[Any] = None


class QuoteStatusUpdate(CamelModel):
    status: QuoteStatus


class QuoteResponse(BaseModel):
    """Quote row, with the creator's name where the creator still exists"""
    id: uuid.UUID
    company_id: uuid.UUID
    created_by: Optional[uuid.UUID] = None
    quote_reference: str
    status: QuoteStatus

    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    customer_address: Optional[str] = None
    customer_postcode: Optional[str] = None

    material_name: Optional[str] = None
    material_brand: Optional[str] = None
    thickness: Optional[int] = None
    edge_profile: Optional[str] = None
    slabs_required: Optional[int] = None

    trade_price_ex_vat: Price = None
    trade_price_inc_vat: Price = None
    customer_price_ex_vat: Price = None
    customer_price_inc_vat: Price = None

    quote_data: Optional[Any] = None
    valid_until: date
    created_at: datetime
    updated_at: Optional[datetime] = None

    first_name: Optional[str] = None
    last_name: Optional[str] = None
