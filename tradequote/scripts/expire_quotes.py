"""
Background job to expire quotes past their validity window

This script should be run periodically (e.g., daily via cron) to move
draft and sent quotes whose valid_until date has passed to expired.
"""

import asyncio
import sys
from datetime import date
from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
import structlog

from tradequote.core.database import async_session_maker, unit_of_work
from tradequote.core.logging_config import configure_logging
from tradequote.models.quote import Quote, QuoteStatus

logger = structlog.get_logger(__name__)

EXPIRABLE_STATUSES = (QuoteStatus.DRAFT, QuoteStatus.SENT)


async def expire_stale_quotes(session: AsyncSession, today: Optional[date] = None) -> dict:
    """Find and expire all quotes whose validity has lapsed"""
    today = today or date.today()

    async with unit_of_work(session, "Error expiring stale quotes"):
        result = await session.exec(
            select(Quote).where(
                Quote.status.in_(EXPIRABLE_STATUSES),
                Quote.valid_until < today,
            )
        )
        stale_quotes = result.all()

        if not stale_quotes:
            logger.info("No stale quotes found")
            return {"processed": 0, "expired": 0}

        for quote in stale_quotes:
            quote.transition_to(QuoteStatus.EXPIRED)
            session.add(quote)
            logger.info(f"Expired quote {quote.quote_reference} (company: {quote.company_id})")

    return {"processed": len(stale_quotes), "expired": len(stale_quotes)}


async def run() -> dict:
    async with async_session_maker() as session:
        return await expire_stale_quotes(session)


def main():
    """Main entry point for cleanup job"""
    configure_logging()
    logger.info("Starting quote expiry job")

    try:
        results = asyncio.run(run())
    except Exception:
        logger.exception("Fatal error in quote expiry job")
        sys.exit(1)

    logger.info("Quote expiry job complete", **results)


if __name__ == "__main__":
    main()
