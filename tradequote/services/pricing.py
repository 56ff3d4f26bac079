"""
Quote price checks

Prices are supplied by the caller and stored exactly as given. Nothing here
fills in or rewrites a price; inconsistent combinations are only reported.
"""

from decimal import Decimal
from typing import Optional


def customer_below_trade(fields: dict) -> bool:
    """True when both ex-VAT prices are present and the customer pays less than trade"""
    trade: Optional[Decimal] = fields.get("trade_price_ex_vat")
    customer: Optional[Decimal] = fields.get("customer_price_ex_vat")
    return trade is not None and customer is not None and customer < trade
