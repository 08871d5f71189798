"""Pure project costing calculators.

Each function derives one figure of the cost breakdown from scalar inputs.
Only the risk calculator validates its arguments.
"""

from __future__ import annotations

from core.constants import (
    ICA_WITHHOLDING_RATE,
    MAX_RISK_PERCENTAGE,
    PERCENT_DIVISOR,
    VAT_RATE,
    WITHHOLDING_RATE,
)
from core.errors import InvalidRiskPercentageError
from core.logging_config import get_logger
from core.types import TaxBreakdown

_LOGGER = get_logger(__name__)


def calculate_cost(
    effort_hours: int,
    hourly_rate: float,
    travel_expenses: float,
    infrastructure_cost: float,
) -> float:
    """Compute labour cost plus travel and infrastructure."""
    return (effort_hours * hourly_rate) + travel_expenses + infrastructure_cost


def calculate_expenses(fixed_expenses: float, supplies: float, utilities: float) -> float:
    """Compute overhead expenses."""
    return fixed_expenses + supplies + utilities


def calculate_risk(base_cost: float, risk_percentage: float) -> float:
    """Compute the risk surcharge over cost plus expenses.

    Args:
        base_cost: Cost plus expenses computed so far.
        risk_percentage: Surcharge percentage, at most 50; NaN is rejected.

    Returns:
        Risk surcharge amount.

    Raises:
        InvalidRiskPercentageError: If risk_percentage exceeds 50.
    """
    if not risk_percentage <= MAX_RISK_PERCENTAGE:
        _LOGGER.error(
            "risk_percentage_rejected",
            risk_percentage=risk_percentage,
            max_risk_percentage=MAX_RISK_PERCENTAGE,
        )
        raise InvalidRiskPercentageError(
            f"risk percentage cannot exceed {MAX_RISK_PERCENTAGE:g}%, got {risk_percentage:g}%"
        )
    return base_cost * (risk_percentage / PERCENT_DIVISOR)


def calculate_tax_breakdown(cost: float, expenses: float, risk: float) -> TaxBreakdown:
    """Compute withholding, ICA withholding, and VAT in their fixed order.

    ICA withholding is taken over the withholding amount, and VAT over the
    total base plus both withholdings.

    Args:
        cost: Computed project cost.
        expenses: Computed project expenses.
        risk: Computed risk surcharge.

    Returns:
        Tax components over the combined base.
    """
    total_base = cost + expenses + risk
    withholding = total_base * WITHHOLDING_RATE
    ica_withholding = withholding * ICA_WITHHOLDING_RATE
    vat = (total_base + withholding + ica_withholding) * VAT_RATE
    breakdown = TaxBreakdown(
        total_base=total_base,
        withholding=withholding,
        ica_withholding=ica_withholding,
        vat=vat,
    )
    _LOGGER.debug(
        "tax_breakdown_computed",
        total_base=total_base,
        withholding=withholding,
        ica_withholding=ica_withholding,
        vat=vat,
    )
    return breakdown


def calculate_taxes(cost: float, expenses: float, risk: float) -> float:
    """Compute combined taxes over cost, expenses, and risk."""
    return calculate_tax_breakdown(cost, expenses, risk).taxes
