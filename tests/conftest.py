"""Canonical loans used across engine and API tests.

Standard: $300K, 6.5%, 30yr (the calculator's default inputs).
Zero-rate: $120K, 0%, 10yr (divides evenly).
"""

import pytest

from mortgage_calc.engine.amortization import compute_schedule
from mortgage_calc.models.loan import AmortizationResult


@pytest.fixture
def standard_schedule() -> AmortizationResult:
    return compute_schedule(300000, 6.5, 30)


@pytest.fixture
def zero_rate_schedule() -> AmortizationResult:
    return compute_schedule(120000, 0, 10)


@pytest.fixture
def standard_inputs() -> dict:
    return {"loan_amount": 300000, "annual_rate": 6.5, "years": 30}
