import os
import time
import uuid
from typing import Dict
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from .cache import cache_stats
from .config import settings
from .routers.sizes import router as sizes_router
from .routers.recommend import router as recommend_router
from .routers.coupons import router as coupons_router
from .routers.referrals import router as referrals_router
from .routers.prices import router as prices_router


logger = structlog.get_logger("pricewise")


app = FastAPI(title="Pricewise Sizing & Shopping API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# Token-bucket rate limit per client
_buckets: Dict[str, tuple[float, float]] = {}


class RateLimited(Exception):
    pass


def _rate_limit(ident: str, requests_per_min: int, burst: int) -> None:
    refill_rate = requests_per_min / 60.0
    capacity = float(burst)
    now = time.time()
    tokens, last = _buckets.get(ident, (capacity, now))
    tokens = min(capacity, tokens + refill_rate * (now - last))
    if tokens < 1.0:
        _buckets[ident] = (tokens, now)
        raise RateLimited(ident)
    _buckets[ident] = (tokens - 1.0, now)


def _validate_config() -> None:
    strict = os.getenv("STRICT_CONFIG", "0") == "1"
    errors = []
    if not settings.api_key or settings.api_key == "change-me":
        errors.append("API_KEY must be set to a secure value")
    if settings.price_band <= 0:
        errors.append("PRICE_BAND must be positive")
    if not 0 <= settings.coupon_verify_min_rate <= 100:
        errors.append("COUPON_VERIFY_MIN_RATE must be between 0 and 100")
    if settings.referral_code_attempts < 1:
        errors.append("REFERRAL_CODE_ATTEMPTS must be at least 1")
    if errors:
        if strict:
            raise RuntimeError("Configuration error: " + "; ".join(errors))
        else:
            for e in errors:
                logger.warning("config_warning", warning=e)


def _request_id(request: Request) -> str:
    # A caller-supplied X-Request-ID wins over a generated one
    rid = getattr(request.state, "request_id", None) or request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
    request.state.request_id = rid
    return rid


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    request_id = _request_id(request)
    resp = None

    try:
        # rate limit per client ip
        client_ip = request.client.host if request.client else "unknown"
        try:
            _rate_limit(client_ip, settings.rate_limit_per_min, settings.rate_limit_burst)
        except RateLimited:
            logger.warning("rate_limit_exceeded", client_ip=client_ip, request_id=request_id)
            resp = JSONResponse(status_code=429, content={"detail": "Too Many Requests"}, headers={"X-Request-ID": request_id})
            return resp

        logger.info("request_started",
                    request_id=request_id,
                    path=str(request.url.path),
                    method=request.method,
                    client_ip=client_ip,
                    user_agent=request.headers.get("user-agent", "unknown"))

        resp = await call_next(request)
        resp.headers["X-Request-ID"] = request_id
        return resp

    except Exception as e:
        duration_ms = int((time.time() - start) * 1000)
        logger.error("request_failed",
                     request_id=request_id,
                     path=str(request.url.path),
                     method=request.method,
                     error=str(e),
                     duration_ms=duration_ms,
                     exc_info=True)
        raise
    finally:
        duration_ms = int((time.time() - start) * 1000)
        status_code = getattr(resp, "status_code", 0) if resp else 0
        logger.info("request_completed",
                    request_id=request_id,
                    path=str(request.url.path),
                    method=request.method,
                    status=status_code,
                    duration_ms=duration_ms)


@app.exception_handler(Exception)
async def handle_exceptions(request: Request, exc: Exception):
    request_id = _request_id(request)

    logger.error("unhandled_exception",
                 request_id=request_id,
                 path=str(request.url.path),
                 method=request.method,
                 error=str(exc),
                 error_type=type(exc).__name__,
                 exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_code": "INTERNAL_ERROR",
            "request_id": request_id,
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())
        }
    )


@app.get("/v1/health")
async def health():
    return {"status": "ok"}


@app.get("/v1/debug/status")
async def debug_status():
    """Debug endpoint reporting cache and rate limiter state"""
    return {
        "status": "ok",
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "cache": cache_stats(),
        "rate_limiting": {
            "requests_per_min": settings.rate_limit_per_min,
            "burst_capacity": settings.rate_limit_burst,
            "active_buckets": len(_buckets)
        }
    }


# Routers under versioned prefix
app.include_router(sizes_router, prefix="/v1")
app.include_router(recommend_router, prefix="/v1")
app.include_router(coupons_router, prefix="/v1")
app.include_router(referrals_router, prefix="/v1")
app.include_router(prices_router, prefix="/v1")

# Validate configuration at import time (warnings by default; set STRICT_CONFIG=1 to enforce)
_validate_config()
