"""
Cash register services layer.

Daily postings lock the day row; the cash-out closes it for good.
"""

from .daily_aggregate import (
    CASH,
    CREDIT,
    ensure_day_open,
    post_sale,
    post_payment,
    get_day,
)
from .cash_out import (
    DaySummary,
    close_day,
    opening_float,
    get_day_summary,
    list_cash_outs,
)


__all__ = [
    # Daily aggregate
    'CASH',
    'CREDIT',
    'ensure_day_open',
    'post_sale',
    'post_payment',
    'get_day',

    # Cash-out
    'DaySummary',
    'close_day',
    'opening_float',
    'get_day_summary',
    'list_cash_outs',
]
