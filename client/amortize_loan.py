"""CLI client for the Mortgage Calc API — posts loan inputs and prints the schedule.

Usage:
    python client/amortize_loan.py --amount 300000 --rate 6.5 --years 30
    python client/amortize_loan.py --rate 0 --api-url http://localhost:8000
"""

import argparse
import asyncio
import sys

import httpx


# ── Helpers ──────────────────────────────────────────────────────────────────

def _pct(v) -> str:
    """Format a fraction as a percentage string."""
    return f"{float(v) * 100:.1f}%"


def _amount(v) -> str:
    return f"{float(v):,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 72}")
    print(f"  {title}")
    print(f"{'=' * 72}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_summary(data: dict) -> None:
    _header("Loan Summary")
    print(f"  Loan Amount:      {_amount(data['loan_amount'])}")
    print(f"  Annual Rate:      {float(data['annual_rate']):g}%")
    print(f"  Term:             {data['years']} years")
    print(f"  Annual Payment:   {_amount(data['annual_payment'])}")


def print_schedule(data: dict) -> None:
    rows = data.get("schedule", [])
    if not rows:
        return
    _header("Amortization Schedule")
    print(f"  {'Yr':>3}  {'Payment':>14}  {'Interest':>14}  {'Principal':>14}  {'Balance':>14}")
    print(f"  {'---':>3}  {'-' * 14}  {'-' * 14}  {'-' * 14}  {'-' * 14}")
    for row in rows:
        print(
            f"  {row['year']:>3}  {_amount(row['payment']):>14}  {_amount(row['interest']):>14}  "
            f"{_amount(row['principal']):>14}  {_amount(row['ending_balance']):>14}"
        )


def print_totals(data: dict) -> None:
    totals = data["totals"]
    _header("Payment Breakdown")
    print(f"  Over {data['years']} year{'' if data['years'] == 1 else 's'}")
    print(f"  Total of {_amount(totals['payment'])} includes {_pct(totals['interest_share'])} interest")
    print(f"  Interest:         {_amount(totals['interest'])}")
    print(f"  Principal:        {_amount(totals['principal'])}")


# ── Main ─────────────────────────────────────────────────────────────────────

async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Compute an annual amortization schedule via the Mortgage Calc API"
    )
    parser.add_argument("--amount", type=float, help="Loan amount")
    parser.add_argument("--rate", type=float, help="Annual interest rate in percent")
    parser.add_argument("--years", type=float, help="Loan term in years")
    parser.add_argument(
        "--api-url",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )

    args = parser.parse_args()

    # Only send what was given; the server fills in its defaults
    payload: dict = {}
    field_map = {
        "amount": "loan_amount",
        "rate": "annual_rate",
        "years": "years",
    }
    for cli_name, api_name in field_map.items():
        val = getattr(args, cli_name)
        if val is not None:
            payload[api_name] = val

    url = f"{args.api_url}/api/v1/amortize"

    async with httpx.AsyncClient(timeout=30) as client:
        try:
            resp = await client.post(url, json=payload)
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {args.api_url}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn mortgage_calc.api.app:app --reload", file=sys.stderr)
            sys.exit(1)
        except httpx.TimeoutException:
            print("Error: Request timed out", file=sys.stderr)
            sys.exit(1)

        if resp.status_code != 200:
            print(f"Error: API returned {resp.status_code}", file=sys.stderr)
            try:
                detail = resp.json().get("detail", resp.text)
            except ValueError:
                detail = resp.text
            if isinstance(detail, dict) and "errors" in detail:
                for field, message in detail["errors"].items():
                    print(f"  {field}: {message}", file=sys.stderr)
            else:
                print(f"  {detail}", file=sys.stderr)
            sys.exit(1)

        data = resp.json()

    print_summary(data)
    print_schedule(data)
    print_totals(data)
    print()


if __name__ == "__main__":
    asyncio.run(main())
