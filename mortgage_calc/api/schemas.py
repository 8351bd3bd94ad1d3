"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field

from mortgage_calc.engine.calculator import default_inputs


# ---- Request schemas ----

class AmortizeRequest(BaseModel):
    loan_amount: float | None = Field(None, description="Loan principal; defaults to the configured loan amount")
    annual_rate: float | None = Field(None, description="Nominal annual rate in percent, e.g. 6.5")
    years: float | None = Field(None, description="Term in years; rounded to whole years")

    def to_inputs(self) -> dict:
        """Raw calculator inputs with unset fields filled from the configured defaults."""
        inputs = default_inputs()
        for name, value in self.model_dump().items():
            if value is not None:
                inputs[name] = value
        return inputs


# ---- Response schemas ----

class ScheduleRowResponse(BaseModel):
    year: int
    payment: float
    interest: float
    principal: float
    ending_balance: float


class TotalsResponse(BaseModel):
    payment: float
    interest: float
    principal: float
    ending_balance: float = 0.0
    interest_share: float


class AmortizationResponse(BaseModel):
    loan_amount: float
    annual_rate: float
    years: int
    annual_payment: float
    schedule: list[ScheduleRowResponse]
    totals: TotalsResponse


class FieldLimitResponse(BaseModel):
    label: str
    min: float
    max: float
    error_message: str


class LimitsResponse(BaseModel):
    fields: dict[str, FieldLimitResponse]
