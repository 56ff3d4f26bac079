"""
Tests for timezone-aware timestamps
"""

from datetime import timezone
import uuid

from sqlmodel import select

from tradequote.core.timestamps import utcnow
from tradequote.models.company import Company
from tradequote.models.quote import Quote
from tradequote.models.user import User


def test_utcnow_is_aware():
    assert utcnow().tzinfo is timezone.utc


def test_model_defaults_are_aware():
    company = Company(company_name="Acme Worktops", email="a@acme.test")
    quote = Quote(company_id=company.id, quote_reference="PW-2026-1234")

    assert company.created_at.tzinfo is not None
    assert company.trial_ends_at.tzinfo is not None
    assert quote.created_at.tzinfo is not None


def test_status_change_stamps_aware_time():
    quote = Quote(company_id=uuid.uuid4(), quote_reference="PW-2026-1234")

    quote.transition_to("sent")

    assert quote.updated_at.tzinfo is not None


async def test_register_and_login_write_timestamps(client, acme, session_maker):
    response = await client.post("/api/login", json={"email": "a@acme.test", "password": "secret123"})
    assert response.status_code == 200

    async with session_maker() as session:
        user = (await session.exec(select(User))).one()

    assert user.created_at is not None
    assert user.last_login_at is not None
