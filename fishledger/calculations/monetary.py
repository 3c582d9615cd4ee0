"""
Money math: net weight x rate, then broker commission on top.

    base       = round2(net_kg x rate)
    commission = round2(base x c/100)
    final      = round2(base x (1 + c/100))

final is computed from the multiplier, not as base + commission.
"""

import math
import re
from decimal import Decimal

from .rounding import Numeric, engine_context, parse_decimal, round_money, to_decimal
from .types import DEFAULT_COMMISSION_PERCENT

CURRENCY_SYMBOL = "₹"

_HUNDRED = Decimal(100)
# Leading glyphs seen on slips and in pasted totals
_CURRENCY_PREFIX = re.compile(r"^\s*(?:₹|৳|\$|Rs\.?|INR)\s*", re.IGNORECASE)


@engine_context
def calculate_base_amount(net_weight_kg: Numeric, rate_per_kg: Numeric) -> float:
    return round_money(to_decimal(net_weight_kg) * to_decimal(rate_per_kg))


@engine_context
def calculate_commission(base_amount: Numeric,
                         commission_percent: Numeric = DEFAULT_COMMISSION_PERCENT) -> float:
    return round_money(to_decimal(base_amount) * to_decimal(commission_percent) / _HUNDRED)


@engine_context
def calculate_final_amount(base_amount: Numeric,
                           commission_percent: Numeric = DEFAULT_COMMISSION_PERCENT) -> float:
    multiplier = 1 + to_decimal(commission_percent) / _HUNDRED
    return round_money(to_decimal(base_amount) * multiplier)


@engine_context
def parse_currency(text) -> float:
    """
    Parse a displayed amount back to a number.
    '₹1,825.60' -> 1825.6. Unparsable input gives 0.0.
    """
    if text is None:
        return 0.0
    cleaned = _CURRENCY_PREFIX.sub("", str(text)).replace(",", "").strip()
    value = parse_decimal(cleaned)
    if value is None or not value.is_finite():
        return 0.0
    return round_money(value)


@engine_context
def format_currency(amount: Numeric, include_symbol: bool = True,
                    symbol: str = CURRENCY_SYMBOL) -> str:
    formatted = f"{round_money(amount):.2f}"
    if include_symbol:
        return f"{symbol}{formatted}"
    return formatted


def _group_indian(digits: str) -> str:
    """'1234567' -> '12,34,567' (last three, then pairs)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


@engine_context
def format_indian_currency(amount: Numeric, symbol: str = CURRENCY_SYMBOL) -> str:
    """Lakh/crore grouping: 1234567.8 -> '₹12,34,567.80'."""
    rounded = round_money(amount)
    if not math.isfinite(rounded):
        return f"{symbol}{rounded}"
    sign = "-" if rounded < 0 else ""
    whole, _, fraction = f"{abs(rounded):.2f}".partition(".")
    return f"{sign}{symbol}{_group_indian(whole)}.{fraction}"
