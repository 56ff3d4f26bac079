"""
Company registration and credential login

These are the only flows that touch tenant data before a token exists.
"""

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from starlette.concurrency import run_in_threadpool
import structlog

from tradequote.core.auth import create_access_token
from tradequote.core.database import unit_of_work
from tradequote.core.errors import Forbidden, InternalFailure, ValidationConflict
from tradequote.core.passwords import dummy_verify, hash_password, verify_password
from tradequote.core.timestamps import utcnow
from tradequote.models.branding import Branding
from tradequote.models.company import Company
from tradequote.models.user import User, UserRole
from tradequote.schemas.auth import (
    AuthCompany,
    AuthResponse,
    AuthUser,
    LoginRequest,
    RegisterRequest,
)

logger = structlog.get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"
EMAIL_TAKEN = "Email already registered"


async def email_registered(session: AsyncSession, email: str) -> bool:
    result = await session.exec(select(User.id).where(User.email == email))
    return result.first() is not None


async def register_company(session: AsyncSession, data: RegisterRequest) -> AuthResponse:
    """Create a company, its default branding and its first admin in one transaction"""
    if await email_registered(session, data.email):
        raise ValidationConflict(EMAIL_TAKEN)

    # bcrypt is CPU bound, keep it off the event loop
    password_hash = await run_in_threadpool(hash_password, data.password)

    async with unit_of_work(session, "Registration failed", on_integrity_error=ValidationConflict(EMAIL_TAKEN)):
        company = Company(
            company_name=data.company_name,
            email=data.email,
            phone=data.phone,
            postcode=data.postcode,
        )
        session.add(company)
        await session.flush()

        session.add(Branding(company_id=company.id))

        user = User(
            company_id=company.id,
            email=data.email,
            password_hash=password_hash,
            first_name=data.first_name,
            last_name=data.last_name,
            phone=data.phone,
            role=UserRole.TRADE_ADMIN,
        )
        session.add(user)

    logger.info(f"Company registered: {company.id}", user_id=str(user.id))

    token = create_access_token(user_id=user.id, company_id=company.id, role=user.role)
    return AuthResponse(
        token=token,
        user=AuthUser(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            role=user.role,
        ),
        company=AuthCompany(id=company.id, name=company.company_name, status=company.account_status),
    )


async def login(session: AsyncSession, data: LoginRequest) -> AuthResponse:
    """Check credentials and issue a session token"""
    async with unit_of_work(session, "Login failed"):
        result = await session.exec(
            select(User, Company)
            .join(Company, User.company_id == Company.id)
            .where(User.email == data.email)
        )
        row = result.first()

        if row is None:
            await run_in_threadpool(dummy_verify)
            logger.warning("Login rejected: unknown email", email=data.email)
            raise ValidationConflict(INVALID_CREDENTIALS)

        user, company = row
        try:
            valid = await run_in_threadpool(verify_password, data.password, user.password_hash)
        except ValueError:
            logger.exception(f"Stored password hash unreadable for user {user.id}")
            raise InternalFailure("Login failed")

        if not valid:
            logger.warning("Login rejected: wrong password", email=data.email)
            raise ValidationConflict(INVALID_CREDENTIALS)

        if not user.is_active:
            raise Forbidden("User account is inactive")

        user.last_login_at = utcnow()
        session.add(user)

    logger.info(f"User logged in: {user.id}")

    token = create_access_token(user_id=user.id, company_id=user.company_id, role=user.role)
    return AuthResponse(
        token=token,
        user=AuthUser(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            role=user.role,
        ),
        company=AuthCompany(id=company.id, name=company.company_name, status=company.account_status),
    )
