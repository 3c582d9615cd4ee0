"""
Transaction calculator — the single entry point used by the transaction
form and the saved-transaction actions.

Pipeline (fixed, no branching beyond the method dispatch):
    1. gross weight  -> net weight   (weight.calculate_net_weight)
    2. net x rate    -> base amount  (monetary.calculate_base_amount)
    3. base          -> commission   (monetary.calculate_commission)
    4. base x (1+c)  -> final amount (monetary.calculate_final_amount)

Stateless: no caches, no counters. Input is not validated here; the caller
(form / API schema) is responsible for rejecting zero, negative, or NaN
numbers.
"""

import logging
from decimal import Decimal
from typing import Iterable, Mapping, Union

from .monetary import calculate_base_amount, calculate_commission, calculate_final_amount
from .rounding import Numeric, engine_context, round_money, round_weight, to_decimal
from .types import (
    DEFAULT_COMMISSION_PERCENT,
    DEFAULT_DEDUCTION_PERCENT,
    CalculationResult,
    DeductionMethod,
    MethodComparison,
    TransactionSummary,
)
from .weight import calculate_net_weight

logger = logging.getLogger(__name__)


@engine_context
def calculate_transaction(gross_weight_kg: Numeric,
                          rate_per_kg: Numeric,
                          deduction_method,
                          deduction_percent: Numeric = DEFAULT_DEDUCTION_PERCENT,
                          commission_percent: Numeric = DEFAULT_COMMISSION_PERCENT) -> CalculationResult:
    """
    Compute net weight, base amount, commission and final amount.

    Args:
        gross_weight_kg: weight on the scale, kg (conventionally kg.grams)
        rate_per_kg: price per kg
        deduction_method: 'A' / 'B' or a DeductionMethod
        deduction_percent: ice/water/packaging deduction, default 5.00
        commission_percent: broker commission, default 2.00

    Raises:
        InvalidDeductionMethod: method is not 'A' or 'B'
    """
    method = DeductionMethod.parse(deduction_method)

    net_weight_kg = calculate_net_weight(gross_weight_kg, method, deduction_percent)
    base_amount = calculate_base_amount(net_weight_kg, rate_per_kg)
    commission_amount = calculate_commission(base_amount, commission_percent)
    final_amount = calculate_final_amount(base_amount, commission_percent)

    logger.debug(
        "Method %s: %s kg -> %s kg @ %s = %s (+%s%% = %s)",
        method.value, gross_weight_kg, net_weight_kg, rate_per_kg,
        base_amount, commission_percent, final_amount,
    )

    return CalculationResult(
        gross_weight_kg=gross_weight_kg,
        net_weight_kg=net_weight_kg,
        rate_per_kg=rate_per_kg,
        base_amount=base_amount,
        commission_percent=commission_percent,
        commission_amount=commission_amount,
        final_amount=final_amount,
        deduction_method=method,
    )


@engine_context
def compare_methods(gross_weight_kg: Numeric,
                    rate_per_kg: Numeric,
                    deduction_percent: Numeric = DEFAULT_DEDUCTION_PERCENT,
                    commission_percent: Numeric = DEFAULT_COMMISSION_PERCENT) -> MethodComparison:
    """
    Run the same weighing through both methods side by side.
    Differences are B - A, rounded at their own precision.
    """
    method_a = calculate_transaction(
        gross_weight_kg, rate_per_kg, DeductionMethod.A,
        deduction_percent=deduction_percent, commission_percent=commission_percent,
    )
    method_b = calculate_transaction(
        gross_weight_kg, rate_per_kg, DeductionMethod.B,
        deduction_percent=deduction_percent, commission_percent=commission_percent,
    )
    return MethodComparison(
        method_a=method_a,
        method_b=method_b,
        net_weight_diff=round_weight(
            to_decimal(method_b.net_weight_kg) - to_decimal(method_a.net_weight_kg)
        ),
        final_amount_diff=round_money(
            to_decimal(method_b.final_amount) - to_decimal(method_a.final_amount)
        ),
    )


def _field(record, name):
    if isinstance(record, Mapping):
        return record.get(name, 0)
    return getattr(record, name)


@engine_context
def summarize_transactions(
    results: Iterable[Union[CalculationResult, Mapping]],
) -> TransactionSummary:
    """
    Day-end roll-up of calculated transactions.

    Commission is totalled as sum(final - base), the same way the ledger
    reconciles it, rather than from the stored commission amounts.
    """
    count = 0
    gross = net = base = commission = final = Decimal(0)

    for record in results:
        record_base = to_decimal(_field(record, "base_amount"))
        record_final = to_decimal(_field(record, "final_amount"))
        count += 1
        gross += to_decimal(_field(record, "gross_weight_kg"))
        net += to_decimal(_field(record, "net_weight_kg"))
        base += record_base
        commission += record_final - record_base
        final += record_final

    return TransactionSummary(
        total_transactions=count,
        total_gross_weight=round_weight(gross),
        total_net_weight=round_weight(net),
        total_base_amount=round_money(base),
        total_commission=round_money(commission),
        total_final_amount=round_money(final),
    )
