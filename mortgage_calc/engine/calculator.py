"""Validate-then-compute flow used by the API and CLI.

Takes raw inputs, returns an explicit outcome. Nothing is cached between calls.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from mortgage_calc.config import settings
from mortgage_calc.engine.amortization import compute_schedule
from mortgage_calc.engine.errors import AmortizationError
from mortgage_calc.engine.validation import FieldRule, has_errors, validate_inputs
from mortgage_calc.models.loan import AmortizationResult

logger = logging.getLogger(__name__)

CALCULATION_ERROR_KEY = "calculation"


@dataclass(frozen=True)
class CalculationOutcome:
    inputs: dict
    errors: dict[str, str] = field(default_factory=dict)
    result: AmortizationResult | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None


def default_inputs() -> dict:
    return {
        "loan_amount": settings.default_loan_amount,
        "annual_rate": settings.default_annual_rate,
        "years": settings.default_years,
    }


def calculate(
    inputs: Mapping,
    rules: Mapping[str, FieldRule] | None = None,
) -> CalculationOutcome:
    """Validate inputs, then run the engine.

    Validation errors short-circuit the engine. Engine failures come back as a
    "calculation" error with no result.
    """
    snapshot = dict(inputs)
    errors = validate_inputs(snapshot, rules)
    if has_errors(errors):
        logger.info("Rejected inputs %s: %s", snapshot, errors)
        return CalculationOutcome(inputs=snapshot, errors=errors)

    try:
        result = compute_schedule(
            snapshot["loan_amount"],
            snapshot["annual_rate"],
            snapshot["years"],
        )
    except AmortizationError as e:
        logger.warning("Calculation failed for %s: %s", snapshot, e)
        return CalculationOutcome(inputs=snapshot, errors={CALCULATION_ERROR_KEY: str(e)})

    return CalculationOutcome(inputs=snapshot, result=result)
