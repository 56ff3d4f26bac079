"""
Unit tests for the quote status lifecycle
"""

import pytest
from datetime import date, timedelta
import uuid

from tradequote.models.quote import QUOTE_STATUS_TRANSITIONS, Quote, QuoteStatus


def make_quote(status: QuoteStatus = QuoteStatus.DRAFT, **kwargs) -> Quote:
    return Quote(
        id=uuid.uuid4(),
        company_id=uuid.uuid4(),
        quote_reference="PW-2026-1234",
        status=status,
        **kwargs,
    )


class TestQuoteStatus:
    """Quote status transitions"""

    def test_initial_state(self):
        quote = Quote(company_id=uuid.uuid4(), quote_reference="PW-2026-1234")

        assert quote.status == QuoteStatus.DRAFT
        assert quote.valid_until == date.today() + timedelta(days=30)

    @pytest.mark.parametrize("current", list(QuoteStatus))
    @pytest.mark.parametrize("target", list(QuoteStatus))
    def test_unenforced_allows_every_move(self, current, target):
        quote = make_quote(current)

        quote.transition_to(target)

        assert quote.status == target
        assert quote.updated_at is not None

    def test_enforced_allows_listed_moves(self):
        for current, targets in QUOTE_STATUS_TRANSITIONS.items():
            for target in targets:
                quote = make_quote(current)
                quote.transition_to(target, enforce=True)
                assert quote.status == target

    def test_enforced_rejects_unlisted_move(self):
        quote = make_quote(QuoteStatus.DRAFT)

        with pytest.raises(ValueError):
            quote.transition_to(QuoteStatus.ACCEPTED, enforce=True)
        assert quote.status == QuoteStatus.DRAFT

    def test_accepted_is_final_when_enforced(self):
        quote = make_quote(QuoteStatus.ACCEPTED)

        for target in QuoteStatus:
            assert quote.can_transition_to(target, enforce=True) is (target == QuoteStatus.ACCEPTED)

    def test_setting_same_status_is_allowed(self):
        quote = make_quote(QuoteStatus.SENT)

        assert quote.can_transition_to(QuoteStatus.SENT, enforce=True)

    def test_accepts_plain_string_status(self):
        quote = make_quote(QuoteStatus.DRAFT)

        quote.transition_to("sent")

        assert quote.status == QuoteStatus.SENT
