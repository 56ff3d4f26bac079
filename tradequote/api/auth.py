"""
Auth API endpoints - registration, login and current user
"""

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession
import uuid

from tradequote.core.database import get_session
from tradequote.core.dependencies import get_current_user_id
from tradequote.schemas.auth import AuthResponse, LoginRequest, ProfileResponse, RegisterRequest
from tradequote.services import accounts
from tradequote.services.tenant_scope import TenantScope, get_tenant_scope

router = APIRouter()


@router.post("/register", response_model=AuthResponse)
async def register(
    data: RegisterRequest,
    session: AsyncSession = Depends(get_session)
):
    """Register a company and its admin user"""
    return await accounts.register_company(session, data)


@router.post("/login", response_model=AuthResponse)
async def login(
    data: LoginRequest,
    session: AsyncSession = Depends(get_session)
):
    """Exchange email and password for a session token"""
    return await accounts.login(session, data)


@router.get("/me", response_model=ProfileResponse)
async def get_current_user_info(
    user_id: uuid.UUID = Depends(get_current_user_id),
    scope: TenantScope = Depends(get_tenant_scope)
):
    """Get current user and company"""
    return await scope.get_profile(user_id)
