from typing import Optional, List, Literal
from pydantic import BaseModel, Field


class PricePoint(BaseModel):
    price: float
    checked_at: Optional[float] = None


class PriceStatsRequest(BaseModel):
    # Most recent first
    history: List[PricePoint] = Field(default_factory=list)
    current_price: float


class PriceStats(BaseModel):
    current: float
    highest: float
    lowest: float
    average: float
    trend: Literal["up", "down", "stable"]
    savings_from_high: float


class PriceAlertRequest(BaseModel):
    previous_price: Optional[float] = None
    current_price: float
    target_price: Optional[float] = None


class PriceAlertResponse(BaseModel):
    alert_type: Optional[Literal["target_reached", "price_drop"]] = None
