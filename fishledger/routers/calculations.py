"""
Calculation endpoints — live recalculation for the transaction form and
the numbers the transaction actions persist.

POST /api/calculations/transaction — one transaction
POST /api/calculations/compare     — Method A vs Method B for one weighing
POST /api/calculations/summary     — day-end totals for a batch
GET  /api/calculations/defaults    — configured form defaults
"""

import logging

from fastapi import APIRouter, HTTPException

from ..calculations import (
    CalculationResult,
    DeductionMethod,
    InvalidDeductionMethod,
    MethodComparison,
    TransactionSummary,
    calculate_transaction,
    compare_methods,
    format_indian_currency,
    format_weight,
    summarize_transactions,
)
from ..config import settings
from ..schemas import (
    DefaultsResponse,
    MethodComparisonRequest,
    SummaryRequest,
    TransactionCalculationRequest,
    TransactionCalculationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculations", tags=["calculations"])


def _calculate(request: TransactionCalculationRequest) -> CalculationResult:
    try:
        return calculate_transaction(**request.resolved())
    except InvalidDeductionMethod as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/transaction", response_model=TransactionCalculationResponse)
def calculate(request: TransactionCalculationRequest):
    result = _calculate(request)
    logger.info(
        "Calculated %.3f kg (method %s) -> final %.2f",
        result.gross_weight_kg, result.deduction_method.value, result.final_amount,
    )
    return TransactionCalculationResponse(
        **result.model_dump(),
        net_weight_display=format_weight(result.net_weight_kg),
        final_amount_display=format_indian_currency(
            result.final_amount, symbol=settings.CURRENCY_SYMBOL,
        ),
    )


@router.post("/compare", response_model=MethodComparison)
def compare(request: MethodComparisonRequest):
    """Same weighing under both deduction methods. Diffs are B - A."""
    deduction = request.deduction_percent
    commission = request.commission_percent
    return compare_methods(
        request.gross_weight_kg,
        request.rate_per_kg,
        deduction_percent=deduction if deduction is not None else settings.DEFAULT_DEDUCTION_PERCENT,
        commission_percent=commission if commission is not None else settings.DEFAULT_COMMISSION_PERCENT,
    )


@router.post("/summary", response_model=TransactionSummary)
def summary(request: SummaryRequest):
    results = [_calculate(t) for t in request.transactions]
    logger.info("Summarized %d transactions", len(results))
    return summarize_transactions(results)


@router.get("/defaults", response_model=DefaultsResponse)
def defaults():
    try:
        method = DeductionMethod.parse(settings.DEFAULT_DEDUCTION_METHOD)
    except InvalidDeductionMethod as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "deduction_method": method,
        "deduction_method_label": method.label,
        "deduction_percent": settings.DEFAULT_DEDUCTION_PERCENT,
        "commission_percent": settings.DEFAULT_COMMISSION_PERCENT,
        "currency_symbol": settings.CURRENCY_SYMBOL,
    }
