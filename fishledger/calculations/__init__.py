"""
Transaction calculation engine.

Pure Python math. No I/O, no database, no settings lookups.
Gross weight + rate in, net weight + base/commission/final amounts out,
under either market deduction convention (Method A or Method B).
"""

from .monetary import (
    calculate_base_amount,
    calculate_commission,
    calculate_final_amount,
    format_currency,
    format_indian_currency,
    parse_currency,
)
from .rounding import round_money, round_weight
from .transaction import calculate_transaction, compare_methods, summarize_transactions
from .types import (
    DEFAULT_COMMISSION_PERCENT,
    DEFAULT_DEDUCTION_PERCENT,
    CalculationInput,
    CalculationResult,
    DeductionMethod,
    InvalidDeductionMethod,
    MethodComparison,
    TransactionSummary,
)
from .weight import (
    calculate_net_weight,
    calculate_net_weight_method_a,
    calculate_net_weight_method_b,
    format_weight,
    kg_and_grams_to_kg,
    kg_to_kg_and_grams,
    parse_weight,
)

__all__ = [
    "DEFAULT_COMMISSION_PERCENT",
    "DEFAULT_DEDUCTION_PERCENT",
    "CalculationInput",
    "CalculationResult",
    "DeductionMethod",
    "InvalidDeductionMethod",
    "MethodComparison",
    "TransactionSummary",
    "calculate_base_amount",
    "calculate_commission",
    "calculate_final_amount",
    "calculate_net_weight",
    "calculate_net_weight_method_a",
    "calculate_net_weight_method_b",
    "calculate_transaction",
    "compare_methods",
    "format_currency",
    "format_indian_currency",
    "format_weight",
    "kg_and_grams_to_kg",
    "kg_to_kg_and_grams",
    "parse_currency",
    "parse_weight",
    "round_money",
    "round_weight",
    "summarize_transactions",
]
