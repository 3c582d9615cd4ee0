"""
Fixed-point rounding helpers shared by the weight and money calculators.

All arithmetic runs on Decimal. Floats are converted through str() so that
15.7 is treated as 15.7 and not as its binary expansion. Results go back out
as floats, rounded half away from zero at exactly one point per formula.

Engine functions run under ENGINE_CONTEXT (via @engine_context), never the
thread's default decimal context: precision is fixed and no signal traps,
so inf x 0 comes out as NaN the way float math would.
"""

import functools
import re
from decimal import Context, Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Union

Numeric = Union[int, float, str, Decimal]

WEIGHT_PLACES = Decimal("0.001")   # kg.grams
MONEY_PLACES = Decimal("0.01")     # rupees.paise

ENGINE_CONTEXT = Context(prec=50, rounding=ROUND_HALF_UP, traps=[])

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def engine_context(func):
    """Run func under a private copy of ENGINE_CONTEXT."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with localcontext(ENGINE_CONTEXT):
            return func(*args, **kwargs)
    return wrapper


def to_decimal(value: Numeric) -> Decimal:
    """Convert a numeric value to Decimal."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


@engine_context
def _quantize(value: Numeric, places: Decimal) -> float:
    d = to_decimal(value)
    # NaN and infinities can't be quantized; let them through untouched
    if not d.is_finite():
        return float(d)
    rounded = d.quantize(places)
    # more digits than the context holds: already far past paise/grams precision
    if rounded.is_nan():
        return float(d)
    return float(rounded)


def round_weight(value: Numeric) -> float:
    """Round to 3 decimal places (grams)."""
    return _quantize(value, WEIGHT_PLACES)


def round_money(value: Numeric) -> float:
    """Round to 2 decimal places (paise)."""
    return _quantize(value, MONEY_PLACES)


def parse_decimal(text) -> Optional[Decimal]:
    """
    Read the leading number out of user-typed text ("15.700 kg" -> 15.700).
    Returns None when the text does not start with a number.
    """
    if text is None:
        return None
    if isinstance(text, (int, float, Decimal)):
        return to_decimal(text)
    match = _LEADING_NUMBER.match(str(text).strip())
    if not match:
        return None
    return Decimal(match.group(0))
