"""
Tests for the quote expiry job
"""

from datetime import date
import uuid

from sqlmodel import select

from tradequote.models.quote import Quote, QuoteStatus
from tradequote.scripts.expire_quotes import expire_stale_quotes

TODAY = date(2026, 3, 1)


async def test_expires_lapsed_open_quotes(db, session_maker):
    company_id = uuid.uuid4()
    rows = [
        ("PW-2026-1001", QuoteStatus.DRAFT, date(2026, 2, 1)),
        ("PW-2026-1002", QuoteStatus.SENT, date(2026, 2, 28)),
        ("PW-2026-1003", QuoteStatus.SENT, date(2026, 3, 1)),
        ("PW-2026-1004", QuoteStatus.ACCEPTED, date(2026, 1, 1)),
        ("PW-2026-1005", QuoteStatus.REJECTED, date(2026, 1, 1)),
    ]
    for reference, status, valid_until in rows:
        db.add(Quote(company_id=company_id, quote_reference=reference, status=status, valid_until=valid_until))
    await db.commit()

    results = await expire_stale_quotes(db, today=TODAY)

    assert results == {"processed": 2, "expired": 2}
    async with session_maker() as session:
        statuses = {
            quote.quote_reference: quote.status
            for quote in (await session.exec(select(Quote))).all()
        }
    assert statuses == {
        "PW-2026-1001": QuoteStatus.EXPIRED,
        "PW-2026-1002": QuoteStatus.EXPIRED,
        "PW-2026-1003": QuoteStatus.SENT,
        "PW-2026-1004": QuoteStatus.ACCEPTED,
        "PW-2026-1005": QuoteStatus.REJECTED,
    }


async def test_nothing_to_expire(db):
    results = await expire_stale_quotes(db, today=TODAY)

    assert results == {"processed": 0, "expired": 0}
