"""
Request models for the calculation API.

This is where input gets validated. The engine itself accepts anything
numeric; these schemas reject what the transaction form would reject
(non-positive weight or rate, percentages outside 0-100).
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .calculations import CalculationResult, DeductionMethod
from .config import settings


class TransactionCalculationRequest(BaseModel):
    gross_weight_kg: float = Field(gt=0, allow_inf_nan=False)
    rate_per_kg: float = Field(gt=0, allow_inf_nan=False)
    deduction_method: Optional[DeductionMethod] = None
    deduction_percent: Optional[float] = Field(default=None, ge=0, le=100)
    commission_percent: Optional[float] = Field(default=None, ge=0, le=100)

    def resolved(self) -> dict:
        """Fill omitted fields from the configured form defaults."""
        return {
            "gross_weight_kg": self.gross_weight_kg,
            "rate_per_kg": self.rate_per_kg,
            "deduction_method": self.deduction_method or settings.DEFAULT_DEDUCTION_METHOD,
            "deduction_percent": (
                self.deduction_percent if self.deduction_percent is not None
                else settings.DEFAULT_DEDUCTION_PERCENT
            ),
            "commission_percent": (
                self.commission_percent if self.commission_percent is not None
                else settings.DEFAULT_COMMISSION_PERCENT
            ),
        }


class MethodComparisonRequest(BaseModel):
    gross_weight_kg: float = Field(gt=0, allow_inf_nan=False)
    rate_per_kg: float = Field(gt=0, allow_inf_nan=False)
    deduction_percent: Optional[float] = Field(default=None, ge=0, le=100)
    commission_percent: Optional[float] = Field(default=None, ge=0, le=100)


class SummaryRequest(BaseModel):
    transactions: List[TransactionCalculationRequest] = []


class TransactionCalculationResponse(CalculationResult):
    """Calculated transaction plus the strings the form shows."""
    net_weight_display: str
    final_amount_display: str


class DefaultsResponse(BaseModel):
    deduction_method: DeductionMethod
    deduction_method_label: str
    deduction_percent: float
    commission_percent: float
    currency_symbol: str
