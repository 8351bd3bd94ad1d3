"""CLI for computing an annual amortization schedule locally.

Usage:
    python -m mortgage_calc.cli --amount 300000 --rate 6.5 --years 30
    python -m mortgage_calc.cli --amount 120000 --rate 0 --years 10 --json
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict

from mortgage_calc.config import settings
from mortgage_calc.engine.calculator import calculate, default_inputs
from mortgage_calc.models.loan import AmortizationResult


def print_result(result: AmortizationResult) -> None:
    loan = result.loan
    totals = result.totals
    print(f"\n{'=' * 64}")
    print(f"  Loan: {loan.principal:,.2f} at {loan.annual_rate_percent:g}% over {loan.term_years} years")
    print(f"{'=' * 64}")
    print(f"  Annual Payment:   {result.annual_payment:,.2f}")
    print()

    print(f"  {'Yr':>3}  {'Payment':>14}  {'Interest':>14}  {'Principal':>14}  {'Balance':>14}")
    print(f"  {'---':>3}  {'-' * 14}  {'-' * 14}  {'-' * 14}  {'-' * 14}")
    for row in result.schedule:
        print(
            f"  {row.year:>3}  {row.payment:>14,.2f}  {row.interest:>14,.2f}  "
            f"{row.principal:>14,.2f}  {row.ending_balance:>14,.2f}"
        )
    print(
        f"  {'Tot':>3}  {totals.payment:>14,.2f}  {totals.interest:>14,.2f}  "
        f"{totals.principal:>14,.2f}  {0:>14,.2f}"
    )
    print()
    print(f"  Total of {totals.payment:,.2f} includes {totals.interest_share:.1%} interest")
    print()


def result_to_dict(result: AmortizationResult) -> dict:
    data = asdict(result)
    data["totals"]["interest_share"] = result.totals.interest_share
    return data


def main(argv: list[str] | None = None) -> int:
    defaults = default_inputs()
    parser = argparse.ArgumentParser(description="Annual loan amortization schedule")
    parser.add_argument("--amount", type=float, default=defaults["loan_amount"],
                        help=f"Loan amount (default: {defaults['loan_amount']:g})")
    parser.add_argument("--rate", type=float, default=defaults["annual_rate"],
                        help=f"Annual interest rate in percent (default: {defaults['annual_rate']:g})")
    parser.add_argument("--years", type=float, default=defaults["years"],
                        help=f"Loan term in years (default: {defaults['years']})")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    outcome = calculate({"loan_amount": args.amount, "annual_rate": args.rate, "years": args.years})
    if not outcome.ok:
        for field, message in outcome.errors.items():
            print(f"Error ({field}): {message}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result_to_dict(outcome.result), indent=2))
    else:
        print_result(outcome.result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
