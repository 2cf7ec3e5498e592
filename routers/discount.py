"""
FastAPI router for discount calculation
"""

import logging
from fastapi import APIRouter, HTTPException, Request

from schemas.discount import DiscountRequest, DiscountResponse, ErrorResponse
from core.rules.discount_rules import DiscountEngine

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/calculate-discount",
    tags=["Discount"],
    responses={
        500: {"model": ErrorResponse, "description": "Internal server error"},
        404: {"model": ErrorResponse, "description": "ZIP code not found"},
        400: {"model": ErrorResponse, "description": "Bad request"}
    }
)

def _get_engine(request: Request) -> DiscountEngine:
    engine = getattr(request.app.state, "discount_engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="Reference data not loaded")
    return engine

@router.post("", response_model=DiscountResponse)
@router.post("/", response_model=DiscountResponse, include_in_schema=False)
async def calculate_discount(body: DiscountRequest, request: Request) -> DiscountResponse:
    """
    Calculate a personalized trade-in discount

    Combines ZIP purchasing power, age bracket, device value and device type
    into a purchasing power score and maps it onto a 5-30% discount.
    Engine errors are rendered by the application's exception handlers.
    """
    engine = _get_engine(request)
    quote = engine.calculate(
        age_range=body.age_range,
        zip_code=body.zip_code,
        device_type=body.device_type,
        device_age=body.device_age,
    )
    logger.info(f"Discount for zip={quote.zip_code} device={quote.device_type}: {quote.discount:.2f}%")
    return DiscountResponse(**quote.to_payload())
