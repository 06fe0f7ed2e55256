from typing import Optional, List, Literal
from pydantic import BaseModel, Field, field_validator


class Coupon(BaseModel):
    id: Optional[str] = None
    code: str
    description: str = ""
    platform: str
    discount_type: Literal["percentage", "fixed", "free_shipping"] = "percentage"
    discount_value: Optional[float] = None
    min_purchase: Optional[float] = None
    categories: Optional[List[str]] = None
    expires_at: Optional[float] = None  # unix seconds
    is_verified: bool = False
    usage_count: int = 0
    success_rate: Optional[int] = None

    @field_validator("code")
    @classmethod
    def _upper_code(cls, v: str) -> str:
        return v.upper()


class CouponReport(BaseModel):
    coupon_id: Optional[str] = None
    user_id: Optional[str] = None
    worked: bool


class CouponQuery(BaseModel):
    coupons: List[Coupon] = Field(default_factory=list)
    query: Optional[str] = None
    platform: Optional[str] = None
    include_expired: bool = False
    limit: Optional[int] = Field(None, ge=0)


class ReportRequest(BaseModel):
    coupon: Coupon
    reports: List[CouponReport] = Field(default_factory=list)
    worked: bool


class ReportResponse(BaseModel):
    coupon: Coupon
    success_rate: float


class PlatformCount(BaseModel):
    platform: str
    count: int
