"""Costeo CLI entry point.

This module parses optional project input overrides and runs the
staged costing report for a single project.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Sequence

from core.config import CosteoConfig
from core.logging_config import configure_logging
from core.types import ProjectInputs
from costing.reporting import run_project_costing

_OVERRIDE_FIELDS = (
    "name",
    "effort_hours",
    "hourly_rate",
    "travel_expenses",
    "infrastructure_cost",
    "fixed_expenses",
    "supplies",
    "utilities",
    "risk_percentage",
)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="costeo",
        description="Report a staged project cost breakdown",
    )
    parser.add_argument("--name", help="Project name")
    parser.add_argument("--effort-hours", type=int, help="Estimated effort in hours")
    parser.add_argument("--hourly-rate", type=float, help="Cost per effort hour")
    parser.add_argument("--travel-expenses", type=float, help="Travel allowance")
    parser.add_argument("--infrastructure-cost", type=float, help="Infrastructure spend")
    parser.add_argument("--fixed-expenses", type=float, help="Fixed overhead expenses")
    parser.add_argument("--supplies", type=float, help="Office supplies expenses")
    parser.add_argument("--utilities", type=float, help="Utility service expenses")
    parser.add_argument(
        "--risk-percentage",
        type=float,
        help="Risk surcharge percentage, at most 50",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Costeo CLI.

    Invalid risk percentages propagate and end the process abnormally.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = CosteoConfig.from_env()
    configure_logging(config.log_level)
    run_project_costing(_build_inputs(args))
    return 0


def _build_inputs(args: argparse.Namespace) -> ProjectInputs:
    """Apply CLI overrides on top of the demo project inputs.

    Args:
        args: Parsed CLI args.

    Returns:
        Project inputs for this run.
    """
    overrides = {
        field_name: getattr(args, field_name)
        for field_name in _OVERRIDE_FIELDS
        if getattr(args, field_name) is not None
    }
    return replace(ProjectInputs.demo(), **overrides)
