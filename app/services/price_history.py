from typing import Iterable, Optional

from ..config import settings
from ..schemas.prices import PricePoint, PriceStats


def _mean(values: list[float], default: float) -> float:
    return sum(values) / len(values) if values else default


def price_stats(history: Iterable[PricePoint], current_price: float, trend_window: int | None = None) -> PriceStats:
    """Summarize a tracked product's price history.

    ``history`` is ordered most recent first. Highest and lowest include the
    current price; the average covers the history only. The trend compares the
    current price with the mean of the newest ``trend_window`` checks.
    """
    window = settings.trend_window if trend_window is None else trend_window
    prices = [p.price for p in history]
    highest = max(prices + [current_price])
    lowest = min(prices + [current_price])
    recent_avg = _mean(prices[:window], current_price)

    if current_price < recent_avg:
        trend = "down"
    elif current_price > recent_avg:
        trend = "up"
    else:
        trend = "stable"

    return PriceStats(
        current=current_price,
        highest=highest,
        lowest=lowest,
        average=_mean(prices, current_price),
        trend=trend,
        savings_from_high=highest - current_price,
    )


def classify_price_change(previous_price: Optional[float], current_price: float, target_price: Optional[float]) -> Optional[str]:
    # Items without a target never alert
    if not target_price:
        return None
    previous = current_price if previous_price is None else previous_price
    if current_price <= target_price < previous:
        return "target_reached"
    if current_price < previous * settings.price_drop_ratio:
        return "price_drop"
    return None
