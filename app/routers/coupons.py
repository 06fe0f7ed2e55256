from typing import List
from fastapi import APIRouter, Depends, HTTPException
import structlog

from ..security import verify_api_key
from ..services import coupons as coupon_service
from ..schemas.coupons import Coupon, CouponQuery, PlatformCount, ReportRequest, ReportResponse


logger = structlog.get_logger("pricewise.coupons")

router = APIRouter(prefix="/coupons", tags=["coupons"], dependencies=[Depends(verify_api_key)])


@router.post("/search")
async def search(req: CouponQuery) -> List[Coupon]:
    if not req.query:
        raise HTTPException(status_code=400, detail="query is required")
    return coupon_service.search_coupons(req.coupons, req.query)


@router.post("/platform")
async def for_platform(req: CouponQuery) -> List[Coupon]:
    if not req.platform:
        raise HTTPException(status_code=400, detail="platform is required")
    return coupon_service.coupons_for_platform(req.coupons, req.platform, include_expired=req.include_expired)


@router.post("/active")
async def active(req: CouponQuery) -> List[Coupon]:
    return coupon_service.active_coupons(req.coupons, limit=req.limit)


@router.post("/platforms")
async def platforms(req: CouponQuery) -> List[PlatformCount]:
    return coupon_service.popular_platforms(req.coupons)


@router.post("/report")
async def report(req: ReportRequest) -> ReportResponse:
    updated, rate = coupon_service.apply_report(req.coupon, req.reports, req.worked)
    logger.info("coupon_reported", code=updated.code, worked=req.worked, success_rate=updated.success_rate)
    return ReportResponse(coupon=updated, success_rate=rate)
