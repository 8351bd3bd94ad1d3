from dataclasses import dataclass


@dataclass(frozen=True)
class LoanInput:
    principal: float
    annual_rate_percent: float  # e.g. 6.5 for 6.5%
    term_years: int  # already rounded

    @property
    def rate(self) -> float:
        return self.annual_rate_percent / 100


@dataclass(frozen=True)
class ScheduleRow:
    year: int
    payment: float
    interest: float
    principal: float
    ending_balance: float


@dataclass(frozen=True)
class Totals:
    payment: float
    interest: float
    principal: float

    @property
    def interest_share(self) -> float:
        """Fraction of total payments that goes to interest."""
        if self.payment == 0:
            return 0.0
        return self.interest / self.payment


@dataclass(frozen=True)
class AmortizationResult:
    loan: LoanInput
    annual_payment: float
    schedule: tuple[ScheduleRow, ...]
    totals: Totals

    @property
    def term_years(self) -> int:
        return self.loan.term_years
