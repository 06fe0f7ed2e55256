from app.schemas.coupons import Coupon, CouponReport
from app.services.coupons import (
    active_coupons,
    apply_report,
    coupons_for_platform,
    is_active,
    is_expired,
    popular_platforms,
    search_coupons,
    sort_coupons,
)

NOW = 1_700_000_000.0


def _coupon(code, platform="Everlane", verified=False, usage=0, expires_at=None, description=""):
    return Coupon(code=code, platform=platform, is_verified=verified, usage_count=usage, expires_at=expires_at, description=description)


COUPONS = [
    _coupon("save10", usage=5),
    _coupon("VIP20", verified=True, usage=1),
    _coupon("OLD", verified=True, usage=50, expires_at=NOW - 1),
    _coupon("SHIPFREE", platform="Poshmark", verified=True, usage=9, description="Free shipping over $50"),
    _coupon("TOP", verified=True, usage=3),
]


def test_code_is_upper_cased():
    assert _coupon("save10").code == "SAVE10"


def test_is_active():
    assert is_active(_coupon("A"), NOW)
    assert not is_active(_coupon("A", expires_at=NOW), NOW)
    assert is_active(_coupon("A", expires_at=NOW + 60), NOW)


def test_sort_verified_first_then_usage():
    codes = [c.code for c in sort_coupons(COUPONS)]
    assert codes == ["OLD", "SHIPFREE", "TOP", "VIP20", "SAVE10"]


def test_platform_filter_drops_expired_unless_asked():
    assert [c.code for c in coupons_for_platform(COUPONS, "Everlane", now=NOW)] == ["TOP", "VIP20", "SAVE10"]
    assert "OLD" in [c.code for c in coupons_for_platform(COUPONS, "Everlane", include_expired=True, now=NOW)]


def test_active_coupons_are_verified_only():
    assert [c.code for c in active_coupons(COUPONS, limit=2, now=NOW)] == ["SHIPFREE", "TOP"]


def test_search_matches_platform_code_and_description():
    assert [c.code for c in search_coupons(COUPONS, "shipping", now=NOW)] == ["SHIPFREE"]
    assert [c.code for c in search_coupons(COUPONS, "posh", now=NOW)] == ["SHIPFREE"]
    assert [c.code for c in search_coupons(COUPONS, "vip", now=NOW)] == ["VIP20"]
    assert search_coupons(COUPONS, "old", now=NOW) == []


def test_popular_platforms():
    counts = popular_platforms(COUPONS, now=NOW)
    assert [(p.platform, p.count) for p in counts] == [("Everlane", 3), ("Poshmark", 1)]


def test_report_verifies_after_enough_successes():
    coupon = _coupon("NEW")
    reports = [CouponReport(worked=True), CouponReport(worked=True)]
    updated, rate = apply_report(coupon, reports, worked=True)
    assert rate == 100.0
    assert updated.is_verified
    assert updated.usage_count == 1
    assert updated.success_rate == 100


def test_report_below_threshold_stays_unverified():
    coupon = _coupon("NEW")
    reports = [CouponReport(worked=True), CouponReport(worked=False)]
    updated, rate = apply_report(coupon, reports, worked=True)
    assert round(rate, 2) == 66.67
    assert updated.success_rate == 67
    assert not updated.is_verified


def test_too_few_reports_do_not_verify():
    updated, _ = apply_report(_coupon("NEW"), [], worked=True)
    assert not updated.is_verified


def test_verification_is_sticky_and_failures_do_not_count_usage():
    coupon = _coupon("NEW", verified=True, usage=4)
    updated, rate = apply_report(coupon, [CouponReport(worked=False)], worked=False)
    assert rate == 0.0
    assert updated.is_verified
    assert updated.usage_count == 4


def test_report_endpoint(client, auth):
    payload = {
        "coupon": {"code": "abc", "platform": "Everlane"},
        "reports": [{"worked": True}, {"worked": True}],
        "worked": True,
    }
    r = client.post("/v1/coupons/report", json=payload, headers=auth)
    assert r.status_code == 200
    body = r.json()
    assert body["coupon"]["code"] == "ABC"
    assert body["coupon"]["is_verified"] is True


def test_search_endpoint_requires_query(client, auth):
    r = client.post("/v1/coupons/search", json={"coupons": []}, headers=auth)
    assert r.status_code == 400


def test_expiry_boundary_differs_per_query():
    edge = [_coupon("EDGE", platform="Poshmark", verified=True, usage=2, expires_at=NOW)]
    assert not is_expired(edge[0], NOW)
    assert [c.code for c in search_coupons(edge, "edge", now=NOW)] == ["EDGE"]
    assert [(p.platform, p.count) for p in popular_platforms(edge, now=NOW)] == [("Poshmark", 1)]
    assert coupons_for_platform(edge, "Poshmark", now=NOW) == []
    assert active_coupons(edge, now=NOW) == []


def test_active_coupons_zero_limit():
    assert active_coupons(COUPONS, limit=0, now=NOW) == []
