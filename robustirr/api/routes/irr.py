"""IRR and NPV routes."""

from fastapi import APIRouter, HTTPException

from robustirr.api.schemas import (
    CashFlowRequest,
    IRRRequest,
    IRRResponse,
    NPVRequest,
    NPVResponse,
)
from robustirr.engine.irr import compute_irr
from robustirr.engine.npv import npv_at_annual_rate
from robustirr.models.cashflow import CashFlowSeries
from robustirr.models.results import IRRResult

router = APIRouter(prefix="/api/v1", tags=["irr"])


def _to_series(req: CashFlowRequest) -> CashFlowSeries:
    return CashFlowSeries.build(req.amounts, req.dates)


def _result_to_response(result: IRRResult) -> IRRResponse:
    """Convert engine IRRResult to API response."""
    bracket = result.bracket
    return IRRResponse(
        irr=result.rate,
        defined=result.is_defined,
        reason=result.reason.value if result.reason else None,
        periodic_rate=result.periodic_rate,
        compounding_frequency=result.compounding_frequency,
        strategy=result.strategy.value if result.strategy else None,
        bracket_low=bracket.low if bracket else None,
        bracket_high=bracket.high if bracket else None,
        gips_adjusted=result.gips_adjusted,
        holding_period=result.holding_period,
    )


@router.post("/irr", response_model=IRRResponse)
async def calculate_irr(req: IRRRequest):
    """Annual effective IRR. Undefined results come back with irr=null and a reason."""
    result = compute_irr(_to_series(req), gips=req.gips)
    return _result_to_response(result)


@router.post("/npv", response_model=NPVResponse)
async def calculate_npv(req: NPVRequest):
    """NPV at an annual effective rate."""
    series = _to_series(req)
    if series.has_missing():
        raise HTTPException(status_code=422, detail="Cash flows contain missing amounts")
    try:
        value = npv_at_annual_rate(req.rate, series)
    except (ValueError, OverflowError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    return NPVResponse(
        rate=req.rate,
        npv=value,
        compounding_frequency=series.compounding_frequency,
    )
