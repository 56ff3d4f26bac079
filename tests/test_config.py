"""
Unit tests for settings validation
"""

import pytest
from pydantic import ValidationError

from tradequote.core.config import DEV_JWT_SECRET_KEY, Settings


def test_production_refuses_missing_signing_key():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, ENVIRONMENT="production", JWT_SECRET_KEY=None)


@pytest.mark.parametrize("key", ["", DEV_JWT_SECRET_KEY])
def test_production_refuses_default_signing_key(key):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, ENVIRONMENT="production", JWT_SECRET_KEY=key)


def test_production_accepts_explicit_signing_key():
    settings = Settings(_env_file=None, ENVIRONMENT="production", JWT_SECRET_KEY="a-real-secret")

    assert settings.is_production
    assert settings.signing_key == "a-real-secret"


def test_development_falls_back_to_dev_key():
    settings = Settings(_env_file=None, ENVIRONMENT="development", JWT_SECRET_KEY=None)

    assert settings.signing_key == DEV_JWT_SECRET_KEY


def test_token_lifetime_defaults_to_seven_days():
    settings = Settings(_env_file=None)

    assert settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES == 7 * 24 * 60
