"""Costeo exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class CosteoError(Exception):
    """Base exception for all Costeo failures."""


class CosteoConfigError(CosteoError):
    """Raised for invalid runtime configuration."""


class CosteoCalculationError(CosteoError):
    """Raised for project costing failures."""


class InvalidRiskPercentageError(CosteoCalculationError, ValueError):
    """Raised when a risk percentage exceeds the allowed ceiling."""
