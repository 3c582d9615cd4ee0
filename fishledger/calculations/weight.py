"""
Weight normalization — gross weight at the scale to net (payable) weight.

Two market conventions:
    Method A: the deduction applies to the whole weight.
        15.700 kg @ 5% -> 15.700 x 0.95 = 14.915 kg
    Method B: the deduction applies to whole kilograms only; the gram
        remainder passes through untouched.
        15.700 kg @ 5% -> (15 x 0.95) + 0.700 = 14.950 kg

Each formula rounds once, at the end, to 3 decimal places.
"""

from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP
from typing import Tuple

from .rounding import Numeric, engine_context, parse_decimal, round_weight, to_decimal
from .types import DEFAULT_DEDUCTION_PERCENT, DeductionMethod

_HUNDRED = Decimal(100)
_THOUSAND = Decimal(1000)


def _retained_fraction(deduction_percent: Numeric) -> Decimal:
    """5% deduction -> 0.95 retained."""
    return 1 - to_decimal(deduction_percent) / _HUNDRED


@engine_context
def calculate_net_weight_method_a(gross_weight_kg: Numeric,
                                  deduction_percent: Numeric = DEFAULT_DEDUCTION_PERCENT) -> float:
    """Net = gross x (1 - d/100)."""
    gross = to_decimal(gross_weight_kg)
    return round_weight(gross * _retained_fraction(deduction_percent))


@engine_context
def calculate_net_weight_method_b(gross_weight_kg: Numeric,
                                  deduction_percent: Numeric = DEFAULT_DEDUCTION_PERCENT) -> float:
    """Net = floor(gross) x (1 - d/100) + (gross - floor(gross))."""
    gross = to_decimal(gross_weight_kg)
    # to_integral_value keeps NaN as NaN where math.floor would raise
    kg_part = gross.to_integral_value(rounding=ROUND_FLOOR)
    grams_part = gross - kg_part
    return round_weight(kg_part * _retained_fraction(deduction_percent) + grams_part)


_METHODS = {
    DeductionMethod.A: calculate_net_weight_method_a,
    DeductionMethod.B: calculate_net_weight_method_b,
}


def calculate_net_weight(gross_weight_kg: Numeric, method,
                         deduction_percent: Numeric = DEFAULT_DEDUCTION_PERCENT) -> float:
    """
    Route to Method A or B.

    Raises InvalidDeductionMethod for anything other than 'A' / 'B'.
    """
    return _METHODS[DeductionMethod.parse(method)](gross_weight_kg, deduction_percent)


# --- Input / display helpers (not used by the calculation path) ---

@engine_context
def parse_weight(text) -> float:
    """Parse a typed weight like '15.700' to kg. Unparsable input gives 0.0."""
    value = parse_decimal(text)
    if value is None or not value.is_finite():
        return 0.0
    return round_weight(value)


@engine_context
def format_weight(weight_kg: Numeric) -> str:
    """Always 3 decimal places: 14.95 -> '14.950'."""
    return f"{round_weight(weight_kg):.3f}"


@engine_context
def kg_and_grams_to_kg(kg: Numeric, grams: Numeric) -> float:
    """15 kg + 700 g -> 15.700"""
    return round_weight(to_decimal(kg) + to_decimal(grams) / _THOUSAND)


@engine_context
def kg_to_kg_and_grams(total_kg: Numeric) -> Tuple[int, int]:
    """15.700 -> (15, 700). Grams round to the nearest whole gram."""
    total = to_decimal(total_kg)
    kg = total.to_integral_value(rounding=ROUND_FLOOR)
    grams = ((total - kg) * _THOUSAND).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return int(kg), int(grams)
