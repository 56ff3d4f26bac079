"""
Company branding used on generated quote documents
"""

from sqlmodel import Field, SQLModel
from sqlalchemy import DateTime
from datetime import datetime
from typing import Optional
import uuid

from tradequote.core.timestamps import utcnow

DEFAULT_PRIMARY_COLOUR = "#033f2a"
DEFAULT_SECONDARY_COLOUR = "#f6d466"


class Branding(SQLModel, table=True):
    """One branding row per company"""

    __tablename__ = "company_branding"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    company_id: uuid.UUID = Field(foreign_key="companies.id", unique=True, index=True, nullable=False)

    logo_url: Optional[str] = Field(default=None, max_length=500)
    primary_colour: str = Field(default=DEFAULT_PRIMARY_COLOUR, max_length=7, nullable=False)
    secondary_colour: str = Field(default=DEFAULT_SECONDARY_COLOUR, max_length=7, nullable=False)
    quote_header_text: Optional[str] = None
    quote_footer_text: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
