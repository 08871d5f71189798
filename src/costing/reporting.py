"""Console reporting for staged project costing.

This module renders cost records as report lines and drives the
sequencer to completion, writing each line as soon as it is produced.
"""

from __future__ import annotations

from typing import Callable, Iterable

from core.logging_config import get_logger
from core.types import ProjectCostRecord, ProjectInputs
from costing.pipeline import stream_project_costing

_LOGGER = get_logger(__name__)


def format_record(record: ProjectCostRecord) -> str:
    """Render one record as a report line including its total value."""
    return (
        f"Proyecto: {record.name}, "
        f"Costo: {_format_amount(record.cost)}, "
        f"Gastos: {_format_amount(record.expenses)}, "
        f"Riesgo: {_format_amount(record.risk)}, "
        f"Impuestos: {_format_amount(record.taxes)}, "
        f"Valor Total: {_format_amount(record.total_value)}"
    )


def report_project_costing(
    records: Iterable[ProjectCostRecord],
    write: Callable[[str], object] = print,
) -> int:
    """Write each record as it arrives.

    Args:
        records: Cost records, consumed one at a time.
        write: Line sink, standard output by default.

    Returns:
        Number of reported records.
    """
    reported = 0
    last_record: ProjectCostRecord | None = None
    for record in records:
        write(format_record(record))
        reported += 1
        last_record = record
    if last_record is not None:
        _LOGGER.info(
            "project_costing_reported",
            name=last_record.name,
            records=reported,
            total_value=last_record.total_value,
        )
    return reported


def run_project_costing(
    inputs: ProjectInputs | None = None,
    write: Callable[[str], object] = print,
) -> int:
    """Run the costing stream to completion and report every record.

    Args:
        inputs: Project inputs, the demo project when omitted.
        write: Line sink, standard output by default.

    Returns:
        Number of reported records.

    Raises:
        InvalidRiskPercentageError: If the risk percentage exceeds 50.
    """
    project = inputs if inputs is not None else ProjectInputs.demo()
    return report_project_costing(stream_project_costing(project), write=write)


def _format_amount(value: float) -> str:
    """Render an amount as Python's shortest float repr, e.g. ``11500.0``."""
    return str(float(value))
