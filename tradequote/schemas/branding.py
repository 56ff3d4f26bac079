"""
Pydantic schemas for company branding and profile updates
"""

from datetime import datetime
from typing import Optional
import uuid

from pydantic import BaseModel, Field, field_validator

from tradequote.schemas.common import CamelModel, HexColour


class BrandingUpdate(CamelModel):
    """Partial branding update; omitted fields keep their stored value"""
    logo_url: Optional[str] = Field(default=None, max_length=500)
    primary_colour: Optional[HexColour] = None
    secondary_colour: Optional[HexColour] = None
    quote_header_text: Optional[str] = None
    quote_footer_text: Optional[str] = None

    @field_validator("primary_colour", "secondary_colour")
    @classmethod
    def colours_not_null(cls, value):
        # Stored colours are NOT NULL; omit the field to keep the current value
        if value is None:
            raise ValueError("colour cannot be null")
        return value


class BrandingResponse(BaseModel):
    """Branding row merged with the company's contact fields"""
    id: uuid.UUID
    company_id: uuid.UUID
    logo_url: Optional[str] = None
    primary_colour: str
    secondary_colour: str
    quote_header_text: Optional[str] = None
    quote_footer_text: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    company_name: str
    email: str
    phone: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    postcode: Optional[str] = None


class CompanyUpdate(CamelModel):
    """Partial company profile update"""
    company_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)
    address_line1: Optional[str] = Field(default=None, max_length=255)
    address_line2: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=100)
    postcode: Optional[str] = Field(default=None, max_length=10)
    vat_number: Optional[str] = Field(default=None, max_length=20)

    @field_validator("company_name")
    @classmethod
    def name_not_null(cls, value):
        if value is None:
            raise ValueError("company name cannot be null")
        return value
