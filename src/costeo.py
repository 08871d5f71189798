"""Public SDK surface for Costeo.

This module provides a stable import path for library users.
It re-exports the costing functions and typed models.
"""

from __future__ import annotations

from core.config import CosteoConfig
from core.errors import CosteoError, InvalidRiskPercentageError
from core.types import ProjectCostRecord, ProjectInputs, TaxBreakdown
from costing.calculators import (
    calculate_cost,
    calculate_expenses,
    calculate_risk,
    calculate_tax_breakdown,
    calculate_taxes,
)
from costing.pipeline import stream_project_costing
from costing.reporting import format_record, report_project_costing, run_project_costing

__all__ = [
    "CosteoConfig",
    "CosteoError",
    "InvalidRiskPercentageError",
    "ProjectCostRecord",
    "ProjectInputs",
    "TaxBreakdown",
    "calculate_cost",
    "calculate_expenses",
    "calculate_risk",
    "calculate_tax_breakdown",
    "calculate_taxes",
    "format_record",
    "report_project_costing",
    "run_project_costing",
    "stream_project_costing",
]
