"""
Password hashing with bcrypt via passlib
"""

from passlib.context import CryptContext

from tradequote.core.config import get_settings

settings = get_settings()

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh random salt"""
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored hash.

    Returns False on mismatch. Raises ValueError when the stored hash is not a
    recognised bcrypt hash.
    """
    return pwd_context.verify(password, password_hash)


def dummy_verify() -> None:
    """Spend the same time as a real verification when no user matched"""
    pwd_context.dummy_verify()
