"""
JWT session token issuing and verification
"""

from datetime import timedelta
from typing import Optional
import uuid

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError
import structlog

from tradequote.core.config import get_settings
from tradequote.core.errors import Forbidden, Unauthenticated
from tradequote.core.timestamps import utcnow
from tradequote.models.user import UserRole
from tradequote.schemas.token import TokenClaims

logger = structlog.get_logger(__name__)
settings = get_settings()


def create_access_token(
    user_id: uuid.UUID,
    company_id: uuid.UUID,
    role: UserRole | str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Create a signed token with user, company and role claims"""
    issued_at = utcnow()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "userId": str(user_id),
        "companyId": str(company_id),
        "role": UserRole(role).value,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }

    return jwt.encode(to_encode, settings.signing_key, algorithm=settings.JWT_ALGORITHM)


def verify_access_token(token: Optional[str]) -> TokenClaims:
    """Verify a token and return its claims.

    Raises Unauthenticated when the token is missing or not a JWT at all, and
    Forbidden when the signature, expiry or claims do not check out.
    """
    if not token:
        raise Unauthenticated("Access denied")

    try:
        jwt.get_unverified_header(token)
    except JWTError:
        raise Unauthenticated("Malformed token")

    try:
        payload = jwt.decode(token, settings.signing_key, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise Forbidden("Token expired")
    except JWTError:
        raise Forbidden("Invalid token")

    try:
        return TokenClaims.model_validate(payload)
    except ValidationError:
        logger.warning("Signed token carried unusable claims")
        raise Forbidden("Invalid token")
