from typing import Dict, List
from fastapi import APIRouter, Depends

from ..security import verify_api_key
from ..services.referrals import (
    complete_referral,
    generate_referral_code,
    leaderboard,
    referral_stats,
    validate_referral,
)
from ..schemas.referrals import (
    CompleteRequest,
    CompletionResult,
    LeaderboardEntry,
    ReferralList,
    ReferralStats,
    ReferralValidation,
    ValidateRequest,
)


router = APIRouter(prefix="/referrals", tags=["referrals"], dependencies=[Depends(verify_api_key)])


@router.get("/code")
async def new_code() -> Dict[str, str]:
    # Uniqueness is checked by the caller's store via allocate_referral_code
    return {"referral_code": generate_referral_code()}


@router.post("/stats")
async def stats(req: ReferralList) -> ReferralStats:
    return referral_stats(req.referrals)


@router.post("/leaderboard")
async def board(req: ReferralList) -> List[LeaderboardEntry]:
    return leaderboard(req.referrals, limit=req.limit)


@router.post("/validate")
async def validate(req: ValidateRequest) -> ReferralValidation:
    return validate_referral(req.referrals, req.code)


@router.post("/complete")
async def complete(req: CompleteRequest) -> CompletionResult:
    # Rejections come back with success=False, not an error status
    return complete_referral(req.referrals, req.code, req.referred_user_id)
