"""Unit tests for CLI command handling."""

from __future__ import annotations

import pytest

from cli.main import main
from core.errors import CosteoConfigError, InvalidRiskPercentageError


def test_cli_without_arguments_prints_demo_breakdown(capsys) -> None:
    """CLI should print four demo report lines and exit cleanly."""
    exit_code = main([])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and len(output) == 4
    assert all(line.startswith("Proyecto: Desarrollo de Software X, ") for line in output)
    assert output[0].endswith("Valor Total: 11500.0")


def test_cli_overrides_individual_inputs(capsys) -> None:
    """CLI flags should replace only the named demo inputs."""
    exit_code = main(["--name", "Portal", "--effort-hours", "10", "--risk-percentage", "0"])
    output = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0
    assert output[0] == (
        "Proyecto: Portal, Costo: 2000.0, Gastos: 0.0, Riesgo: 0.0, "
        "Impuestos: 0.0, Valor Total: 2000.0"
    )
    assert "Riesgo: 0.0" in output[2]


def test_cli_propagates_invalid_risk_after_partial_output(capsys) -> None:
    """Risk rejection should escape the CLI after two printed lines."""
    with pytest.raises(InvalidRiskPercentageError):
        main(["--risk-percentage", "50.0001"])

    assert len(capsys.readouterr().out.strip().splitlines()) == 2


def test_cli_rejects_invalid_log_level(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    """Invalid logging config should fail before any report line."""
    monkeypatch.setenv("COSTEO_LOG_LEVEL", "loud")

    with pytest.raises(CosteoConfigError):
        main([])

    assert capsys.readouterr().out == ""


def test_cli_rejects_nan_risk_percentage(capsys) -> None:
    """A NaN risk percentage should stop the run before risk is reported."""
    with pytest.raises(InvalidRiskPercentageError):
        main(["--risk-percentage", "nan"])

    output = capsys.readouterr().out
    assert len(output.strip().splitlines()) == 2 and "nan" not in output
