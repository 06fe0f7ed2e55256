from fastapi import APIRouter, Depends

from ..security import verify_api_key
from ..services.price_history import classify_price_change, price_stats
from ..schemas.prices import PriceAlertRequest, PriceAlertResponse, PriceStats, PriceStatsRequest


router = APIRouter(prefix="/prices", tags=["prices"], dependencies=[Depends(verify_api_key)])


@router.post("/stats")
async def stats(req: PriceStatsRequest) -> PriceStats:
    return price_stats(req.history, req.current_price)


@router.post("/alert")
async def alert(req: PriceAlertRequest) -> PriceAlertResponse:
    return PriceAlertResponse(alert_type=classify_price_change(req.previous_price, req.current_price, req.target_price))
