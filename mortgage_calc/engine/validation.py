"""Field-level range checks run before the amortization engine.

Bounds come from settings; messages are rebuilt from the active bounds.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass

from mortgage_calc.config import Settings, settings


@dataclass(frozen=True)
class FieldRule:
    label: str
    min: float
    max: float
    error_message: str


def _money(v: float) -> str:
    return f"${v:,.0f}"


def validation_rules(config: Settings = settings) -> dict[str, FieldRule]:
    """Rules keyed by input field name."""
    return {
        "loan_amount": FieldRule(
            label="Loan Amount",
            min=config.min_loan_amount,
            max=config.max_loan_amount,
            error_message=(
                f"Loan amount must be between {_money(config.min_loan_amount)}"
                f" and {_money(config.max_loan_amount)}"
            ),
        ),
        "annual_rate": FieldRule(
            label="Annual Interest Rate (%)",
            min=config.min_annual_rate,
            max=config.max_annual_rate,
            error_message=(
                f"Rate must be between {config.min_annual_rate:g}%"
                f" and {config.max_annual_rate:g}%"
            ),
        ),
        "years": FieldRule(
            label="Loan Term (Years)",
            min=config.min_years,
            max=config.max_years,
            error_message=f"Term must be between {config.min_years} and {config.max_years} years",
        ),
    }


def _to_number(value) -> float | None:
    """Parse a raw field value; None when missing, blank, non-numeric or NaN."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def validate_field(field: str, value, rules: Mapping[str, FieldRule] | None = None) -> str | None:
    """Return an error message for one field, or None if it passes (or has no rule)."""
    rules = validation_rules() if rules is None else rules
    rule = rules.get(field)
    if rule is None:
        return None

    number = _to_number(value)
    if number is None:
        return f"{rule.label} is required"

    if number < rule.min or number > rule.max:
        return rule.error_message

    return None


def validate_inputs(inputs: Mapping, rules: Mapping[str, FieldRule] | None = None) -> dict[str, str]:
    """Validate every ruled field. Missing keys are treated as missing values."""
    rules = validation_rules() if rules is None else rules
    errors: dict[str, str] = {}
    for field in rules:
        error = validate_field(field, inputs.get(field), rules)
        if error:
            errors[field] = error
    return errors


def has_errors(errors: Mapping[str, str]) -> bool:
    return len(errors) > 0
