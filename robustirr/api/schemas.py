"""Pydantic schemas for API request/response models."""

from datetime import date

from pydantic import BaseModel, Field, model_validator


# ---- Request schemas ----

class CashFlowRequest(BaseModel):
    amounts: list[float | None] = Field(..., description="Signed amounts, outflows negative")
    dates: list[date] | None = Field(
        None, description="One date per amount; omit for unit-spaced periods"
    )

    @model_validator(mode="after")
    def dates_match_amounts(self):
        if self.dates is not None and len(self.dates) != len(self.amounts):
            raise ValueError("Cash flows and dates must have same length")
        return self


class IRRRequest(CashFlowRequest):
    gips: bool = Field(False, description="Report actual return for holdings under a year")


class NPVRequest(CashFlowRequest):
    rate: float = Field(..., gt=-1.0, description="Annual effective discount rate")


# ---- Response schemas ----

class IRRResponse(BaseModel):
    irr: float | None
    defined: bool
    reason: str | None = None
    periodic_rate: float | None = None
    compounding_frequency: int
    strategy: str | None = None
    bracket_low: float | None = None
    bracket_high: float | None = None
    gips_adjusted: bool = False
    holding_period: float | None = None


class NPVResponse(BaseModel):
    rate: float
    npv: float
    compounding_frequency: int
