"""
Unit tests for quote price checks
"""

from decimal import Decimal

from tradequote.services.pricing import customer_below_trade


def test_customer_below_trade():
    fields = {"trade_price_ex_vat": Decimal("500"), "customer_price_ex_vat": Decimal("450")}

    assert customer_below_trade(fields)


def test_customer_at_or_above_trade():
    assert not customer_below_trade({"trade_price_ex_vat": Decimal("500"), "customer_price_ex_vat": Decimal("500")})
    assert not customer_below_trade({"trade_price_ex_vat": Decimal("500"), "customer_price_ex_vat": Decimal("600")})


def test_missing_price_is_not_flagged():
    assert not customer_below_trade({"trade_price_ex_vat": Decimal("500"), "customer_price_ex_vat": None})
    assert not customer_below_trade({"customer_price_ex_vat": Decimal("1")})
    assert not customer_below_trade({})


def test_fields_not_modified():
    fields = {"trade_price_ex_vat": Decimal("500")}

    customer_below_trade(fields)

    assert fields == {"trade_price_ex_vat": Decimal("500")}
