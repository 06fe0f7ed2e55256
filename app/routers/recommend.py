from fastapi import APIRouter, Depends
import structlog

from ..cache import cache_get, cache_key, cache_set
from ..config import settings
from ..security import verify_api_key
from ..services.recommender import similar_products
from ..schemas.recommend import SimilarRequest, SimilarResponse


logger = structlog.get_logger("pricewise.recommend")

router = APIRouter(prefix="/recommend", tags=["recommend"], dependencies=[Depends(verify_api_key)])


@router.post("/similar")
async def similar(req: SimilarRequest) -> SimilarResponse:
    key = cache_key("similar", req.model_dump_json())
    cached = cache_get(key)
    if cached is not None:
        logger.info("similar_cache_hit", reference_id=req.reference.id)
        return cached

    ranked = similar_products(req.reference, req.candidates, limit=req.limit)
    resp = SimilarResponse(items=ranked)
    cache_set(key, resp, settings.cache_ttl_seconds)
    logger.info("similar_ranked", reference_id=req.reference.id, candidates=len(req.candidates), returned=len(ranked))
    return resp
