from typing import Iterable, List, Set
import structlog

from ..config import settings
from ..schemas.recommend import CandidateItem, ScoredCandidate


logger = structlog.get_logger("pricewise.recommender")


# Weights for scoring (higher = more important)
BRAND_WEIGHT = 2
CLASS_WEIGHT = 1
GENDER_WEIGHT = 1
PRICE_WEIGHT = 1


def score(candidate: CandidateItem, reference: CandidateItem, price_band: float | None = None) -> int:
    band = settings.price_band if price_band is None else price_band
    total = 0
    if candidate.brand == reference.brand:
        total += BRAND_WEIGHT
    if candidate.garment_class == reference.garment_class:
        total += CLASS_WEIGHT
    # Two items without a gender tag count as the same gender
    if candidate.gender == reference.gender:
        total += GENDER_WEIGHT
    if abs(candidate.price - reference.price) < band:
        total += PRICE_WEIGHT
    return total


def rank_candidates(reference: CandidateItem, candidates: Iterable[CandidateItem], price_band: float | None = None) -> List[ScoredCandidate]:
    scored = [ScoredCandidate(item=c, score=score(c, reference, price_band)) for c in candidates]
    # sorted() is stable: equal scores keep their input order
    return sorted(scored, key=lambda s: s.score, reverse=True)


def similar_products(
    reference: CandidateItem,
    pool: Iterable[CandidateItem],
    limit: int | None = None,
    price_band: float | None = None,
) -> List[ScoredCandidate]:
    """Rank a candidate pool against a reference item.

    The reference itself is dropped from the pool and candidates sharing an id
    are collapsed to their first occurrence before ranking. Items without an id
    are never deduplicated.
    """
    limit = settings.similar_limit if limit is None else limit
    seen: Set[str] = set()
    unique: List[CandidateItem] = []
    for item in pool:
        if item.id is not None:
            if item.id == reference.id or item.id in seen:
                continue
            seen.add(item.id)
        unique.append(item)

    ranked = rank_candidates(reference, unique, price_band)
    logger.debug("similar_ranked", reference_id=reference.id, pool=len(unique), limit=limit)
    return ranked[:limit]
