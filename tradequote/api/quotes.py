"""
Quotes API endpoints
"""

from fastapi import APIRouter, Depends
from typing import List
import uuid

from tradequote.core.dependencies import get_current_user_id
from tradequote.schemas.common import SuccessResponse
from tradequote.schemas.quote import QuoteCreate, QuoteResponse, QuoteStatusUpdate
from tradequote.services.tenant_scope import TenantScope, get_tenant_scope

router = APIRouter()


@router.post("", response_model=QuoteResponse)
async def create_quote(
    data: QuoteCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    scope: TenantScope = Depends(get_tenant_scope)
):
    """Create a quote"""
    return await scope.create_quote(user_id, data)


@router.get("", response_model=List[QuoteResponse])
async def list_quotes(scope: TenantScope = Depends(get_tenant_scope)):
    """List the company's quotes, newest first"""
    return await scope.list_quotes()


@router.get("/{quote_id}", response_model=QuoteResponse)
async def get_quote(
    quote_id: uuid.UUID,
    scope: TenantScope = Depends(get_tenant_scope)
):
    """Get a single quote"""
    return await scope.get_quote(quote_id)


@router.patch("/{quote_id}/status", response_model=SuccessResponse)
async def update_quote_status(
    quote_id: uuid.UUID,
    update: QuoteStatusUpdate,
    scope: TenantScope = Depends(get_tenant_scope)
):
    """Set a quote's status"""
    await scope.set_quote_status(quote_id, update.status)
    return SuccessResponse()
