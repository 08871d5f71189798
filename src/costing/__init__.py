"""Project costing calculators, sequencer, and reporter."""

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
