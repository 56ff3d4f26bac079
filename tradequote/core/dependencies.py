"""
Authentication dependencies for FastAPI
"""

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
import uuid

from tradequote.core.auth import verify_access_token
from tradequote.schemas.token import TokenClaims

security = HTTPBearer(auto_error=False)


async def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> TokenClaims:
    """Verify the bearer token and return its claims"""
    token = credentials.credentials if credentials else None
    return verify_access_token(token)


async def get_current_user_id(claims: TokenClaims = Depends(get_current_claims)) -> uuid.UUID:
    """Get current user ID from the verified token"""
    return claims.user_id


async def get_company_id(claims: TokenClaims = Depends(get_current_claims)) -> uuid.UUID:
    """Get the caller's company ID; the only source of tenant identity"""
    return claims.company_id
