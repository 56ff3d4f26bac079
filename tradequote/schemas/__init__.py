"""
Schemas module
"""

from tradequote.schemas.auth import (
    AuthResponse,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
)
from tradequote.schemas.branding import BrandingResponse, BrandingUpdate, CompanyUpdate
from tradequote.schemas.common import SuccessResponse
from tradequote.schemas.quote import QuoteCreate, QuoteResponse, QuoteStatusUpdate
from tradequote.schemas.token import TokenClaims

__all__ = [
    "AuthResponse",
    "BrandingResponse",
    "BrandingUpdate",
    "CompanyUpdate",
    "LoginRequest",
    "ProfileResponse",
    "QuoteCreate",
    "QuoteResponse",
    "QuoteStatusUpdate",
    "RegisterRequest",
    "SuccessResponse",
    "TokenClaims",
]
