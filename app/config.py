import os
from pydantic import BaseModel


class Settings(BaseModel):
    api_key: str = os.getenv("API_KEY", "change-me")

    # Similarity scoring
    price_band: float = float(os.getenv("PRICE_BAND", "50"))
    similar_limit: int = int(os.getenv("SIMILAR_LIMIT", "6"))

    # Coupon verification thresholds
    coupon_verify_min_reports: int = int(os.getenv("COUPON_VERIFY_MIN_REPORTS", "3"))
    coupon_verify_min_rate: float = float(os.getenv("COUPON_VERIFY_MIN_RATE", "70"))
    active_coupons_limit: int = int(os.getenv("ACTIVE_COUPONS_LIMIT", "20"))

    # Referral codes
    referral_code_attempts: int = int(os.getenv("REFERRAL_CODE_ATTEMPTS", "10"))
    leaderboard_limit: int = int(os.getenv("LEADERBOARD_LIMIT", "10"))

    # Price alerts
    price_drop_ratio: float = float(os.getenv("PRICE_DROP_RATIO", "0.9"))
    trend_window: int = int(os.getenv("TREND_WINDOW", "7"))

    # Rate limit (token bucket)
    rate_limit_per_min: int = int(os.getenv("RATE_LIMIT_PER_MIN", "60"))
    rate_limit_burst: int = int(os.getenv("RATE_LIMIT_BURST", "30"))

    # Cache TTL seconds
    cache_ttl_seconds: int = int(os.getenv("CACHE_TTL_SECONDS", "600"))


settings = Settings()
