"""
Tenant-scoped data access

A TenantScope is bound to the company id of a verified session token and
every read or write it performs is filtered on that id.
"""

from typing import Optional
import uuid

from fastapi import Depends
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
import structlog

from tradequote.core.database import get_session, unit_of_work
from tradequote.core.dependencies import get_company_id
from tradequote.core.errors import NotFound
from tradequote.core.timestamps import utcnow
from tradequote.models.branding import Branding
from tradequote.models.company import Company
from tradequote.models.quote import QuoteStatus
from tradequote.models.user import User
from tradequote.schemas.auth import ProfileResponse
from tradequote.schemas.branding import BrandingResponse, BrandingUpdate, CompanyUpdate
from tradequote.schemas.quote import QuoteCreate, QuoteResponse
from tradequote.services import quotes

logger = structlog.get_logger(__name__)


class TenantScope:
    """Data access for a single company"""

    def __init__(self, session: AsyncSession, company_id: uuid.UUID):
        self.session = session
        self.company_id = company_id

    async def get_profile(self, user_id: uuid.UUID) -> ProfileResponse:
        """The calling user together with their company"""
        async with unit_of_work(self.session, "Failed to get user"):
            result = await self.session.exec(
                select(User, Company)
                .join(Company, User.company_id == Company.id)
                .where(User.id == user_id, User.company_id == self.company_id)
            )
            row = result.first()

        if row is None:
            raise NotFound("User not found")

        user, company = row
        return ProfileResponse(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            role=user.role,
            company_id=company.id,
            company_name=company.company_name,
            account_status=company.account_status,
            trial_ends_at=company.trial_ends_at,
        )

    async def get_branding(self) -> Optional[BrandingResponse]:
        """Branding merged with company contact fields, or None when the company has no branding row"""
        async with unit_of_work(self.session, "Failed to get branding"):
            result = await self.session.exec(
                select(Branding, Company)
                .join(Company, Branding.company_id == Company.id)
                .where(Branding.company_id == self.company_id)
            )
            row = result.first()

        if row is None:
            return None

        branding, company = row
        return BrandingResponse(
            **branding.model_dump(),
            company_name=company.company_name,
            email=company.email,
            phone=company.phone,
            address_line1=company.address_line1,
            address_line2=company.address_line2,
            city=company.city,
            postcode=company.postcode,
        )

    async def update_branding(self, changes: BrandingUpdate) -> None:
        """Apply only the fields present in the request"""
        values = changes.model_dump(exclude_unset=True)
        async with unit_of_work(self.session, "Failed to update branding"):
            result = await self.session.exec(
                select(Branding).where(Branding.company_id == self.company_id)
            )
            branding = result.first()
            if branding is None:
                raise NotFound("Branding not found")

            for key, value in values.items():
                setattr(branding, key, value)
            branding.updated_at = utcnow()
            self.session.add(branding)

        logger.info(f"Branding updated for company {self.company_id}", fields=sorted(values))

    async def update_company(self, changes: CompanyUpdate) -> None:
        """Apply only the fields present in the request"""
        values = changes.model_dump(exclude_unset=True)
        async with unit_of_work(self.session, "Failed to update company"):
            result = await self.session.exec(
                select(Company).where(Company.id == self.company_id)
            )
            company = result.first()
            if company is None:
                raise NotFound("Company not found")

            for key, value in values.items():
                setattr(company, key, value)
            company.updated_at = utcnow()
            self.session.add(company)

        logger.info(f"Company updated: {self.company_id}", fields=sorted(values))

    async def create_quote(self, creator_user_id: uuid.UUID, data: QuoteCreate) -> QuoteResponse:
        return await quotes.create_quote(self.session, self.company_id, creator_user_id, data)

    async def list_quotes(self) -> list[QuoteResponse]:
        return await quotes.list_quotes(self.session, self.company_id)

    async def get_quote(self, quote_id: uuid.UUID) -> QuoteResponse:
        return await quotes.get_quote(self.session, quote_id, self.company_id)

    async def set_quote_status(self, quote_id: uuid.UUID, new_status: QuoteStatus) -> None:
        await quotes.set_quote_status(self.session, quote_id, self.company_id, new_status)


async def get_tenant_scope(
    company_id: uuid.UUID = Depends(get_company_id),
    session: AsyncSession = Depends(get_session),
) -> TenantScope:
    """Dependency giving each request a scope for its token's company"""
    return TenantScope(session, company_id)
