"""
Value types for the calculation engine.

Every result is a frozen pydantic model built fresh per call. Numeric fields
are plain floats with no range constraints: the engine trusts its caller,
so NaN and negative values are carried through rather than rejected.
"""

import enum
import logging

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DEFAULT_DEDUCTION_PERCENT = 5.00
DEFAULT_COMMISSION_PERCENT = 2.00


class InvalidDeductionMethod(ValueError):
    """Raised when a deduction method is neither 'A' nor 'B'."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Invalid deduction method: {value!r}. "
            f"Expected one of {[m.value for m in DeductionMethod]}"
        )


class DeductionMethod(str, enum.Enum):
    A = "A"  # total weight deduction
    B = "B"  # kilogram-only deduction, grams pass through

    @property
    def label(self) -> str:
        return _METHOD_LABELS[self]

    @classmethod
    def parse(cls, value) -> "DeductionMethod":
        """Exact match only. No case folding, no fallback."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        logger.warning("Rejected deduction method %r", value)
        raise InvalidDeductionMethod(value)


_METHOD_LABELS = {
    DeductionMethod.A: "Total Weight Deduction",
    DeductionMethod.B: "Kilogram-Only Deduction",
}


class CalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    gross_weight_kg: float
    net_weight_kg: float
    rate_per_kg: float
    base_amount: float
    commission_percent: float
    commission_amount: float
    final_amount: float
    deduction_method: DeductionMethod


class CalculationInput(BaseModel):
    """One transaction's raw numbers, as entered at the scale."""
    model_config = ConfigDict(frozen=True)

    gross_weight_kg: float
    rate_per_kg: float
    deduction_method: DeductionMethod
    deduction_percent: float = DEFAULT_DEDUCTION_PERCENT
    commission_percent: float = DEFAULT_COMMISSION_PERCENT

    def calculate(self) -> CalculationResult:
        from .transaction import calculate_transaction
        return calculate_transaction(
            self.gross_weight_kg,
            self.rate_per_kg,
            self.deduction_method,
            deduction_percent=self.deduction_percent,
            commission_percent=self.commission_percent,
        )


class MethodComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    method_a: CalculationResult
    method_b: CalculationResult
    net_weight_diff: float     # B - A, kg
    final_amount_diff: float   # B - A, currency


class TransactionSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_transactions: int = 0
    total_gross_weight: float = 0.0
    total_net_weight: float = 0.0
    total_base_amount: float = 0.0
    total_commission: float = 0.0
    total_final_amount: float = 0.0
