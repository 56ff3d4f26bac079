"""
Quote record manager

Every query here filters on the company id handed in by the caller, which
always comes from a verified session token.
"""

from datetime import date
from typing import Optional
import random
import uuid

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
import structlog

from tradequote.core.config import get_settings
from tradequote.core.database import unit_of_work
from tradequote.core.errors import (
    InvalidStatusTransition,
    NotFound,
    QuoteReferenceConflict,
)
from tradequote.models.quote import Quote, QuoteStatus
from tradequote.models.user import User
from tradequote.schemas.quote import QuoteCreate, QuoteResponse
from tradequote.services.pricing import customer_below_trade

logger = structlog.get_logger(__name__)
settings = get_settings()


def generate_quote_reference(year: Optional[int] = None) -> str:
    """Human readable reference, e.g. PW-2026-4821.

    Only 9000 values per year, so collisions are expected now and then.
    """
    year = year or date.today().year
    return f"{settings.QUOTE_REFERENCE_PREFIX}-{year}-{random.randint(1000, 9999)}"


async def allocate_quote_reference(session: AsyncSession) -> str:
    """Draw references until one is not already taken"""
    for attempt in range(1, settings.QUOTE_REFERENCE_MAX_ATTEMPTS + 1):
        reference = generate_quote_reference()
        result = await session.exec(select(Quote.id).where(Quote.quote_reference == reference))
        if result.first() is None:
            return reference
        logger.warning(f"Quote reference {reference} taken", attempt=attempt)

    raise QuoteReferenceConflict()


def to_response(quote: Quote, first_name: Optional[str] = None, last_name: Optional[str] = None) -> QuoteResponse:
    return QuoteResponse(**quote.model_dump(), first_name=first_name, last_name=last_name)


def _with_creator():
    return select(Quote, User.first_name, User.last_name).join(
        User, Quote.created_by == User.id, isouter=True
    )


async def create_quote(
    session: AsyncSession,
    company_id: uuid.UUID,
    creator_user_id: uuid.UUID,
    data: QuoteCreate,
) -> QuoteResponse:
    """Create a draft quote for the company with a fresh reference.

    The unique constraint on quote_reference is the real guard: if a
    concurrent insert takes the same reference the insert is rolled back and
    QuoteReferenceConflict is raised for the caller to retry.
    """
    async with unit_of_work(session, "Failed to create quote", on_integrity_error=QuoteReferenceConflict()):
        fields = data.model_dump()
        if customer_below_trade(fields):
            logger.warning(
                "Customer price below trade price",
                trade_price_ex_vat=str(fields["trade_price_ex_vat"]),
                customer_price_ex_vat=str(fields["customer_price_ex_vat"]),
            )

        reference = await allocate_quote_reference(session)

        quote = Quote(
            company_id=company_id,
            created_by=creator_user_id,
            quote_reference=reference,
            status=QuoteStatus.DRAFT,
            **fields,
        )
        session.add(quote)

    logger.info(f"Quote created: {quote.quote_reference}", quote_id=str(quote.id))
    return to_response(quote)


async def list_quotes(session: AsyncSession, company_id: uuid.UUID) -> list[QuoteResponse]:
    """All quotes of a company, newest first.

    Not paginated; large tenants will want limit/offset here.
    """
    async with unit_of_work(session, "Failed to get quotes"):
        result = await session.exec(
            _with_creator()
            .where(Quote.company_id == company_id)
            .order_by(Quote.created_at.desc())
        )
        rows = result.all()

    return [to_response(quote, first_name, last_name) for quote, first_name, last_name in rows]


async def get_quote(session: AsyncSession, quote_id: uuid.UUID, company_id: uuid.UUID) -> QuoteResponse:
    """Fetch one quote; a quote of another company is reported as missing"""
    async with unit_of_work(session, "Failed to get quote"):
        result = await session.exec(
            _with_creator().where(Quote.id == quote_id, Quote.company_id == company_id)
        )
        row = result.first()

    if row is None:
        raise NotFound("Quote not found")

    quote, first_name, last_name = row
    return to_response(quote, first_name, last_name)


async def set_quote_status(
    session: AsyncSession,
    quote_id: uuid.UUID,
    company_id: uuid.UUID,
    new_status: QuoteStatus,
) -> None:
    """Change a quote's status.

    Any status may follow any other unless ENFORCE_QUOTE_TRANSITIONS is on,
    in which case QUOTE_STATUS_TRANSITIONS applies. An id that is absent or
    owned by another company matches nothing and changes nothing.
    """
    async with unit_of_work(session, "Failed to update quote"):
        result = await session.exec(
            select(Quote).where(Quote.id == quote_id, Quote.company_id == company_id)
        )
        quote = result.first()
        if quote is None:
            logger.info(f"Status update matched no quote: {quote_id}", company_id=str(company_id))
            return

        previous = QuoteStatus(quote.status)
        try:
            quote.transition_to(new_status, enforce=settings.ENFORCE_QUOTE_TRANSITIONS)
        except ValueError as e:
            raise InvalidStatusTransition(str(e))
        session.add(quote)

    logger.info(f"Quote {quote.quote_reference} status {previous.value} -> {QuoteStatus(new_status).value}")
