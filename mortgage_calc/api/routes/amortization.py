"""Amortization routes."""

from fastapi import APIRouter, HTTPException

from mortgage_calc.api.schemas import (
    AmortizeRequest,
    AmortizationResponse,
    FieldLimitResponse,
    LimitsResponse,
    ScheduleRowResponse,
    TotalsResponse,
)
from mortgage_calc.engine.calculator import CALCULATION_ERROR_KEY, calculate
from mortgage_calc.engine.validation import validation_rules
from mortgage_calc.models.loan import AmortizationResult

router = APIRouter(prefix="/api/v1", tags=["amortization"])


def _result_to_response(result: AmortizationResult) -> AmortizationResponse:
    """Convert engine AmortizationResult to API response."""
    schedule = [
        ScheduleRowResponse(
            year=row.year,
            payment=row.payment,
            interest=row.interest,
            principal=row.principal,
            ending_balance=row.ending_balance,
        )
        for row in result.schedule
    ]

    t = result.totals
    totals = TotalsResponse(
        payment=t.payment,
        interest=t.interest,
        principal=t.principal,
        interest_share=t.interest_share,
    )

    return AmortizationResponse(
        loan_amount=result.loan.principal,
        annual_rate=result.loan.annual_rate_percent,
        years=result.loan.term_years,
        annual_payment=result.annual_payment,
        schedule=schedule,
        totals=totals,
    )


@router.post("/amortize", response_model=AmortizationResponse)
async def amortize(req: AmortizeRequest):
    """Loan inputs → annual payment, yearly schedule and totals.

    Unset fields fall back to the configured defaults.
    """
    outcome = calculate(req.to_inputs())

    if CALCULATION_ERROR_KEY in outcome.errors:
        raise HTTPException(status_code=400, detail=outcome.errors[CALCULATION_ERROR_KEY])
    if not outcome.ok:
        raise HTTPException(status_code=422, detail={"errors": outcome.errors})

    return _result_to_response(outcome.result)


@router.get("/amortize/limits", response_model=LimitsResponse)
async def limits():
    """Active input bounds, for clients that validate before posting."""
    return LimitsResponse(fields={
        name: FieldLimitResponse(
            label=rule.label,
            min=rule.min,
            max=rule.max,
            error_message=rule.error_message,
        )
        for name, rule in validation_rules().items()
    })
