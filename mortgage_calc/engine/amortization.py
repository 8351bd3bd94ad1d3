"""Annual amortization schedule computation.

Pure functions: floats in, frozen dataclasses out. No I/O.

Equal annual payments, annual compounding. The last year's principal is forced to
the remaining balance so the schedule always ends at exactly zero.
"""

import logging
import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from mortgage_calc.engine.errors import InvalidInput, NumericOverflow
from mortgage_calc.models.loan import AmortizationResult, LoanInput, ScheduleRow, Totals

logger = logging.getLogger(__name__)

WHOLE_YEARS = Decimal("1")
MAX_TERM_YEARS = 100_000  # one row per year


def round_term(term_years) -> int:
    """Round a term to whole years, half away from zero (2.5 -> 3)."""
    try:
        return int(Decimal(str(term_years)).quantize(WHOLE_YEARS, ROUND_HALF_UP))
    except (InvalidOperation, ValueError, OverflowError):
        raise InvalidInput(f"Term must be a finite number of years, got {term_years!r}") from None


def _finite(name: str, value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"{name} must be numeric, got {value!r}") from None
    if not math.isfinite(number):
        raise InvalidInput(f"{name} must be finite, got {value!r}")
    return number


def build_loan(principal, annual_rate_percent, term_years) -> LoanInput:
    """Coerce raw scalars into a LoanInput, failing fast on values the engine can't amortize."""
    amount = _finite("Principal", principal)
    rate_pct = _finite("Annual rate", annual_rate_percent)
    n = round_term(term_years)

    if amount <= 0:
        raise InvalidInput(f"Principal must be positive, got {amount!r}")
    if n < 1:
        raise InvalidInput(f"Term must be at least 1 year after rounding, got {term_years!r}")
    if n > MAX_TERM_YEARS:
        raise NumericOverflow(f"Term of {n} years exceeds the {MAX_TERM_YEARS}-row schedule limit")

    return LoanInput(principal=amount, annual_rate_percent=rate_pct, term_years=n)


def annual_payment(principal: float, rate: float, term_years: int) -> float:
    """Level annual payment that retires `principal` over `term_years`.

    `rate` is a decimal annual rate (0.065 for 6.5%). A zero rate splits the
    principal evenly across the years.
    """
    if rate == 0:
        return principal / term_years

    # PMT = P * [r(1+r)^n] / [(1+r)^n - 1]
    # growth = (1+r)^n - 1 via expm1/log1p keeps precision for tiny rates
    try:
        growth = math.expm1(term_years * math.log1p(rate))
        payment = principal * (rate * (growth + 1)) / growth
    except OverflowError as e:
        raise NumericOverflow(
            f"(1 + {rate!r})^{term_years} is outside the float range"
        ) from e
    except ValueError as e:
        raise InvalidInput(f"Rate {rate!r} has no compound growth factor") from e
    except ZeroDivisionError as e:
        raise NumericOverflow(
            f"Rate {rate!r} is too small to resolve over {term_years} years"
        ) from e

    if not math.isfinite(payment):
        raise NumericOverflow(f"Annual payment is not finite ({payment!r})")
    return payment


def _zero_rate_schedule(loan: LoanInput) -> AmortizationResult:
    n = loan.term_years
    payment = annual_payment(loan.principal, 0.0, n)

    rows: list[ScheduleRow] = []
    balance = loan.principal
    for year in range(1, n + 1):
        principal_paid = balance if year == n else payment
        balance = max(0.0, balance - principal_paid)
        rows.append(ScheduleRow(
            year=year,
            payment=payment,
            interest=0.0,
            principal=principal_paid,
            ending_balance=balance,
        ))

    return AmortizationResult(
        loan=loan,
        annual_payment=payment,
        schedule=tuple(rows),
        totals=Totals(payment=payment * n, interest=0.0, principal=loan.principal),
    )


def _level_payment_schedule(loan: LoanInput) -> AmortizationResult:
    n = loan.term_years
    r = loan.rate
    payment = annual_payment(loan.principal, r, n)

    rows: list[ScheduleRow] = []
    balance = loan.principal
    total_interest = 0.0
    total_principal = 0.0

    for year in range(1, n + 1):
        interest = balance * r
        principal_paid = payment - interest

        # Final year clears the balance; interest above still uses the pre-clamp balance
        if year == n:
            principal_paid = balance

        balance = max(0.0, balance - principal_paid)
        total_interest += interest
        total_principal += principal_paid

        rows.append(ScheduleRow(
            year=year,
            payment=payment,
            interest=interest,
            principal=principal_paid,
            ending_balance=balance,
        ))

    return AmortizationResult(
        loan=loan,
        annual_payment=payment,
        schedule=tuple(rows),
        totals=Totals(payment=payment * n, interest=total_interest, principal=total_principal),
    )


def compute_schedule(principal, annual_rate_percent, term_years) -> AmortizationResult:
    """Generate the full annual amortization schedule.

    Args:
        principal: Loan amount
        annual_rate_percent: Nominal annual rate in percent (e.g. 6.5 for 6.5%)
        term_years: Loan term in years; non-integers are rounded half away from zero

    Raises:
        InvalidInput: principal <= 0, term < 1 after rounding, or non-finite inputs
        NumericOverflow: intermediate values outside the float range, or a term
            longer than MAX_TERM_YEARS
    """
    loan = build_loan(principal, annual_rate_percent, term_years)

    if loan.rate == 0:
        result = _zero_rate_schedule(loan)
    else:
        result = _level_payment_schedule(loan)

    totals = result.totals
    if not all(math.isfinite(v) for v in (totals.payment, totals.interest, totals.principal)):
        raise NumericOverflow(f"Totals are not finite for {loan}")

    logger.debug(
        "Amortized %.2f at %s%% over %d years: payment %.2f, interest %.2f",
        loan.principal, loan.annual_rate_percent, loan.term_years,
        result.annual_payment, totals.interest,
    )
    return result
