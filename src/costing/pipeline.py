"""Staged project costing sequencer.

This module runs the four calculators in dependency order and yields a
snapshot after each stage, so consumers report figures as they appear.
"""

from __future__ import annotations

from typing import Iterator

from core.logging_config import get_logger
from core.types import ProjectCostRecord, ProjectInputs
from costing.calculators import (
    calculate_cost,
    calculate_expenses,
    calculate_risk,
    calculate_taxes,
)

_LOGGER = get_logger(__name__)


def stream_project_costing(inputs: ProjectInputs) -> Iterator[ProjectCostRecord]:
    """Yield one cost record per completed stage.

    Stages run lazily: the next figure is computed only after the consumer
    requests the next record. A rejected risk percentage raises from the
    third step and no taxes are computed.

    Args:
        inputs: Project inputs for this run.

    Yields:
        Four records carrying cost, then expenses, then risk, then taxes.

    Raises:
        InvalidRiskPercentageError: If the risk percentage exceeds 50.
    """
    name = inputs.name
    cost = calculate_cost(
        inputs.effort_hours,
        inputs.hourly_rate,
        inputs.travel_expenses,
        inputs.infrastructure_cost,
    )
    _log_stage("cost", name, cost)
    yield ProjectCostRecord(name=name, cost=cost)

    expenses = calculate_expenses(inputs.fixed_expenses, inputs.supplies, inputs.utilities)
    _log_stage("expenses", name, expenses)
    yield ProjectCostRecord(name=name, cost=cost, expenses=expenses)

    risk = calculate_risk(cost + expenses, inputs.risk_percentage)
    _log_stage("risk", name, risk)
    yield ProjectCostRecord(name=name, cost=cost, expenses=expenses, risk=risk)

    taxes = calculate_taxes(cost, expenses, risk)
    _log_stage("taxes", name, taxes)
    yield ProjectCostRecord(name=name, cost=cost, expenses=expenses, risk=risk, taxes=taxes)


def _log_stage(stage: str, name: str, value: float) -> None:
    """Log one completed costing stage."""
    _LOGGER.debug("costing_stage_completed", stage=stage, name=name, value=value)
