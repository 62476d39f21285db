"""
Cost and profit arithmetic for stock items.

Amounts are whole Toman; missing amounts count as zero.
"""
from typing import Optional


def total_cost(
    purchase_toman: Optional[int] = None,
    fees_toman: Optional[int] = None,
    refurb_toman: Optional[int] = None,
) -> int:
    """Purchase price plus fees plus refurbishment."""
    return (purchase_toman or 0) + (fees_toman or 0) + (refurb_toman or 0)


def profit(
    sold_price_toman: Optional[int] = None,
    purchase_toman: Optional[int] = None,
    fees_toman: Optional[int] = None,
    refurb_toman: Optional[int] = None,
) -> int:
    """Sale price minus total cost; an unsold item is a loss of its cost."""
    return (sold_price_toman or 0) - total_cost(purchase_toman, fees_toman, refurb_toman)


def margin_percent(sold_price_toman: Optional[int], cost_toman: int) -> Optional[float]:
    """Profit as a percentage of the sale price, or None without a positive sale price."""
    if not sold_price_toman or sold_price_toman <= 0:
        return None
    return (sold_price_toman - cost_toman) / sold_price_toman * 100
