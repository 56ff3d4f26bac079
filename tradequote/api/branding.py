"""
Branding and company profile endpoints
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from tradequote.schemas.branding import BrandingResponse, BrandingUpdate, CompanyUpdate
from tradequote.schemas.common import SuccessResponse
from tradequote.services.tenant_scope import TenantScope, get_tenant_scope

router = APIRouter()


@router.get("/branding", response_model=BrandingResponse)
async def get_branding(scope: TenantScope = Depends(get_tenant_scope)):
    """Branding merged with company contact details; an empty object when none is stored"""
    branding = await scope.get_branding()
    if branding is None:
        return JSONResponse(content={})
    return branding


@router.put("/branding", response_model=SuccessResponse)
async def update_branding(
    changes: BrandingUpdate,
    scope: TenantScope = Depends(get_tenant_scope)
):
    """Partially update branding"""
    await scope.update_branding(changes)
    return SuccessResponse()


@router.put("/company", response_model=SuccessResponse)
async def update_company(
    changes: CompanyUpdate,
    scope: TenantScope = Depends(get_tenant_scope)
):
    """Partially update company details"""
    await scope.update_company(changes)
    return SuccessResponse()
