"""Core constants used across Costeo modules.

This module centralizes tax rates, the risk ceiling, and demo inputs.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

WITHHOLDING_RATE = 0.11
ICA_WITHHOLDING_RATE = 0.01
VAT_RATE = 0.19
MAX_RISK_PERCENTAGE = 50.0
PERCENT_DIVISOR = 100

DEMO_PROJECT_NAME = "Desarrollo de Software X"
DEMO_EFFORT_HOURS = 200
DEMO_HOURLY_RATE = 50.0
DEMO_TRAVEL_EXPENSES = 500.0
DEMO_INFRASTRUCTURE_COST = 1000.0
DEMO_FIXED_EXPENSES = 300.0
DEMO_SUPPLIES = 50.0
DEMO_UTILITIES = 100.0
DEMO_RISK_PERCENTAGE = 30.0

LOG_LEVEL_ENV_VAR = "COSTEO_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "warning"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
