import hashlib
import time
from typing import Any, Dict


# Simple in-memory TTL cache keyed by request fingerprint
_cache: Dict[str, Any] = {}
_cache_exp: Dict[str, float] = {}


def cache_key(prefix: str, payload: str) -> str:
    return f"{prefix}:{hashlib.md5(payload.encode()).hexdigest()}"


def cache_get(key: str):
    now = time.time()
    if key in _cache and _cache_exp.get(key, 0) > now:
        return _cache[key]
    if key in _cache:
        _cache.pop(key, None)
        _cache_exp.pop(key, None)
    return None


def _purge_expired(now: float) -> None:
    for key in [k for k, exp in _cache_exp.items() if exp <= now]:
        _cache.pop(key, None)
        _cache_exp.pop(key, None)


def cache_set(key: str, value: Any, ttl: int) -> None:
    now = time.time()
    _purge_expired(now)
    _cache[key] = value
    _cache_exp[key] = now + ttl


def cache_stats() -> Dict[str, int]:
    now = time.time()
    return {
        "entries": len(_cache),
        "expired": len([k for k, v in _cache_exp.items() if v < now]),
    }


def cache_clear() -> None:
    _cache.clear()
    _cache_exp.clear()
