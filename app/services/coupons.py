import time
from collections import Counter
from typing import Iterable, List, Tuple
import structlog

from ..config import settings
from ..schemas.coupons import Coupon, CouponReport, PlatformCount


logger = structlog.get_logger("pricewise.coupons")


def is_active(coupon: Coupon, now: float | None = None) -> bool:
    now = time.time() if now is None else now
    return coupon.expires_at is None or coupon.expires_at > now


def is_expired(coupon: Coupon, now: float | None = None) -> bool:
    # Search and platform counts still show a coupon in its final instant
    now = time.time() if now is None else now
    return coupon.expires_at is not None and coupon.expires_at < now


def sort_coupons(coupons: Iterable[Coupon]) -> List[Coupon]:
    # Verified first, then most used
    return sorted(coupons, key=lambda c: (not c.is_verified, -c.usage_count))


def coupons_for_platform(coupons: Iterable[Coupon], platform: str, include_expired: bool = False, now: float | None = None) -> List[Coupon]:
    selected = [c for c in coupons if c.platform == platform]
    if not include_expired:
        selected = [c for c in selected if is_active(c, now)]
    return sort_coupons(selected)


def active_coupons(coupons: Iterable[Coupon], limit: int | None = None, now: float | None = None) -> List[Coupon]:
    limit = settings.active_coupons_limit if limit is None else limit
    verified = [c for c in coupons if c.is_verified and is_active(c, now)]
    return sorted(verified, key=lambda c: -c.usage_count)[:limit]


def search_coupons(coupons: Iterable[Coupon], query: str, now: float | None = None) -> List[Coupon]:
    q = query.lower()
    hits = [
        c for c in coupons
        if not is_expired(c, now)
        and (q in c.platform.lower() or q in c.code.lower() or q in c.description.lower())
    ]
    return sort_coupons(hits)


def popular_platforms(coupons: Iterable[Coupon], now: float | None = None) -> List[PlatformCount]:
    counts = Counter(c.platform for c in coupons if not is_expired(c, now))
    return [PlatformCount(platform=p, count=n) for p, n in counts.most_common()]


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def apply_report(coupon: Coupon, reports: Iterable[CouponReport], worked: bool) -> Tuple[Coupon, float]:
    """Fold a new user report into a coupon's stats.

    ``reports`` are the reports already on file; the new one is counted with
    them. A coupon becomes verified once enough reports exist and the success
    rate clears the threshold, and stays verified afterwards.
    """
    all_reports = list(reports) + [CouponReport(coupon_id=coupon.id, worked=worked)]
    successes = sum(1 for r in all_reports if r.worked)
    success_rate = successes / len(all_reports) * 100

    should_verify = (
        len(all_reports) >= settings.coupon_verify_min_reports
        and success_rate >= settings.coupon_verify_min_rate
    )
    if should_verify and not coupon.is_verified:
        logger.info("coupon_verified", code=coupon.code, platform=coupon.platform, reports=len(all_reports), success_rate=success_rate)

    updated = coupon.model_copy(update={
        "usage_count": coupon.usage_count + 1 if worked else coupon.usage_count,
        "success_rate": _round_half_up(success_rate),
        "is_verified": should_verify or coupon.is_verified,
    })
    return updated, success_rate
