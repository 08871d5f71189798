"""Shared typed models.

This module defines immutable data models used by the costing pipeline,
the reporter, and the CLI to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import (
    DEMO_EFFORT_HOURS,
    DEMO_FIXED_EXPENSES,
    DEMO_HOURLY_RATE,
    DEMO_INFRASTRUCTURE_COST,
    DEMO_PROJECT_NAME,
    DEMO_RISK_PERCENTAGE,
    DEMO_SUPPLIES,
    DEMO_TRAVEL_EXPENSES,
    DEMO_UTILITIES,
)


@dataclass(frozen=True)
class ProjectInputs:
    """Scalar inputs for one project costing run.

    Attributes:
        name: Project display name.
        effort_hours: Estimated effort in hours.
        hourly_rate: Cost per effort hour.
        travel_expenses: Travel allowance added to cost.
        infrastructure_cost: Infrastructure spend added to cost.
        fixed_expenses: Fixed overhead expenses.
        supplies: Office supplies expenses.
        utilities: Utility service expenses.
        risk_percentage: Risk surcharge percentage in [0, 50].
    """

    name: str
    effort_hours: int
    hourly_rate: float
    travel_expenses: float
    infrastructure_cost: float
    fixed_expenses: float
    supplies: float
    utilities: float
    risk_percentage: float

    @classmethod
    def demo(cls) -> "ProjectInputs":
        """Return the built-in demo project inputs."""
        return cls(
            name=DEMO_PROJECT_NAME,
            effort_hours=DEMO_EFFORT_HOURS,
            hourly_rate=DEMO_HOURLY_RATE,
            travel_expenses=DEMO_TRAVEL_EXPENSES,
            infrastructure_cost=DEMO_INFRASTRUCTURE_COST,
            fixed_expenses=DEMO_FIXED_EXPENSES,
            supplies=DEMO_SUPPLIES,
            utilities=DEMO_UTILITIES,
            risk_percentage=DEMO_RISK_PERCENTAGE,
        )


@dataclass(frozen=True)
class ProjectCostRecord:
    """Snapshot of project figures computed so far.

    Fields not yet computed by the pipeline hold 0.0.

    Attributes:
        name: Project display name.
        cost: Labour, travel, and infrastructure cost.
        expenses: Fixed, supplies, and utilities expenses.
        risk: Risk surcharge over cost plus expenses.
        taxes: Withholding, ICA withholding, and VAT combined.
    """

    name: str
    cost: float = 0.0
    expenses: float = 0.0
    risk: float = 0.0
    taxes: float = 0.0

    @property
    def total_value(self) -> float:
        """Sum of every computed figure."""
        return self.cost + self.expenses + self.risk + self.taxes


@dataclass(frozen=True)
class TaxBreakdown:
    """Individual tax components over one total base.

    Attributes:
        total_base: Cost plus expenses plus risk.
        withholding: Source withholding over the total base.
        ica_withholding: ICA withholding over the source withholding.
        vat: VAT over base plus both withholdings.
    """

    total_base: float
    withholding: float
    ica_withholding: float
    vat: float

    @property
    def taxes(self) -> float:
        """Combined tax amount."""
        return self.withholding + self.ica_withholding + self.vat
