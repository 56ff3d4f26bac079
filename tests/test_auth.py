"""
Unit tests for JWT session tokens
"""

import pytest
from datetime import timedelta
import uuid
from jose import jwt

from tradequote.core.auth import create_access_token, verify_access_token
from tradequote.core.config import get_settings
from tradequote.core.errors import Forbidden, Unauthenticated
from tradequote.models.user import UserRole

settings = get_settings()


def test_create_and_verify_token():
    """Verified claims are exactly the ones issued"""
    user_id = uuid.uuid4()
    company_id = uuid.uuid4()

    token = create_access_token(user_id=user_id, company_id=company_id, role=UserRole.TRADE_ADMIN)
    claims = verify_access_token(token)

    assert claims.user_id == user_id
    assert claims.company_id == company_id
    assert claims.role == UserRole.TRADE_ADMIN


def test_token_claim_names():
    token = create_access_token(user_id=uuid.uuid4(), company_id=uuid.uuid4(), role="trade_user")
    payload = jwt.get_unverified_claims(token)

    assert set(payload) == {"userId", "companyId", "role", "iat", "exp"}
    assert payload["role"] == "trade_user"


def test_token_expires_after_seven_days():
    token = create_access_token(user_id=uuid.uuid4(), company_id=uuid.uuid4(), role="trade_user")
    payload = jwt.get_unverified_claims(token)

    assert payload["exp"] - payload["iat"] == 7 * 24 * 60 * 60


def test_expired_token_is_forbidden():
    token = create_access_token(
        user_id=uuid.uuid4(),
        company_id=uuid.uuid4(),
        role="trade_user",
        expires_delta=timedelta(seconds=-1),
    )

    with pytest.raises(Forbidden):
        verify_access_token(token)


def test_token_signed_with_other_key_is_forbidden():
    payload = {
        "userId": str(uuid.uuid4()),
        "companyId": str(uuid.uuid4()),
        "role": "trade_admin",
    }
    forged = jwt.encode(payload, "someone-elses-key", algorithm=settings.JWT_ALGORITHM)

    with pytest.raises(Forbidden):
        verify_access_token(forged)


def test_token_without_company_is_forbidden():
    token = jwt.encode({"userId": str(uuid.uuid4()), "role": "trade_admin"}, settings.signing_key)

    with pytest.raises(Forbidden):
        verify_access_token(token)


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token_is_unauthenticated(token):
    with pytest.raises(Unauthenticated):
        verify_access_token(token)


def test_malformed_token_is_unauthenticated():
    with pytest.raises(Unauthenticated):
        verify_access_token("invalid.token.string.here")
