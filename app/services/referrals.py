import random
import secrets
from collections import Counter
from typing import Awaitable, Callable, Iterable, List, Optional
import structlog

from ..config import settings
from ..schemas.referrals import CompletionResult, LeaderboardEntry, Referral, ReferralStats, ReferralValidation


logger = structlog.get_logger("pricewise.referrals")


# No 0/O or 1/I so codes survive being read aloud
CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
CODE_LENGTH = 8


def normalize_code(code: str) -> str:
    return code.upper()


def generate_referral_code(rng: random.Random | None = None) -> str:
    rng = rng or secrets.SystemRandom()
    return "".join(rng.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH))


async def allocate_referral_code(
    exists: Callable[[str], Awaitable[bool]],
    max_attempts: int | None = None,
    rng: random.Random | None = None,
) -> str:
    """Draw codes until ``exists`` reports one as free.

    After ``max_attempts`` collisions the last drawn code is returned as is;
    the store's uniqueness index is the final guard.
    """
    max_attempts = settings.referral_code_attempts if max_attempts is None else max_attempts
    code = generate_referral_code(rng)
    attempts = 0
    while attempts < max_attempts:
        if not await exists(code):
            break
        logger.info("referral_code_collision", attempt=attempts + 1)
        code = generate_referral_code(rng)
        attempts += 1
    else:
        logger.warning("referral_code_attempts_exhausted", attempts=max_attempts)
    return code


def referral_stats(referrals: Iterable[Referral]) -> ReferralStats:
    referrals = list(referrals)
    pending = [r for r in referrals if r.status == "pending"]
    completed = [r for r in referrals if r.status == "completed"]
    return ReferralStats(
        referral_code=pending[0].referral_code if pending else None,
        completed_referrals=len(completed),
        pending_referrals=len(pending),
        total_referrals=len(referrals),
    )


def leaderboard(referrals: Iterable[Referral], limit: int | None = None) -> List[LeaderboardEntry]:
    limit = settings.leaderboard_limit if limit is None else limit
    counts = Counter(r.referrer_id for r in referrals if r.status == "completed")
    return [
        LeaderboardEntry(rank=i + 1, user_id=user_id, referral_count=n)
        for i, (user_id, n) in enumerate(counts.most_common(limit))
    ]


def _find_pending(referrals: Iterable[Referral], code: str) -> Optional[Referral]:
    wanted = normalize_code(code)
    for r in referrals:
        if r.referral_code == wanted and r.status == "pending":
            return r
    return None


def validate_referral(referrals: Iterable[Referral], code: str) -> ReferralValidation:
    referral = _find_pending(referrals, code)
    if referral is None:
        return ReferralValidation(valid=False, message="Invalid or expired referral code")
    return ReferralValidation(valid=True, referrer_id=referral.referrer_id)


def complete_referral(
    referrals: Iterable[Referral],
    code: str,
    referred_user_id: str,
    rng: random.Random | None = None,
) -> CompletionResult:
    """Mark a pending code as used by a newly signed-up user.

    On success the referrer gets a fresh pending code so they can keep
    sharing. The returned list holds the updated referrals; the input is not
    modified.
    """
    referrals = list(referrals)
    referral = _find_pending(referrals, code)
    if referral is None:
        return CompletionResult(success=False, message="Invalid referral code", referrals=referrals)
    if referral.referrer_id == referred_user_id:
        return CompletionResult(success=False, message="Cannot refer yourself", referrals=referrals)
    if any(r.referred_user_id == referred_user_id for r in referrals):
        return CompletionResult(success=False, message="User was already referred", referrals=referrals)

    taken = {r.referral_code for r in referrals}
    new_code = generate_referral_code(rng)
    for _ in range(settings.referral_code_attempts):
        if new_code not in taken:
            break
        new_code = generate_referral_code(rng)

    updated = [
        r.model_copy(update={"status": "completed", "referred_user_id": referred_user_id}) if r is referral else r
        for r in referrals
    ]
    updated.append(Referral(referrer_id=referral.referrer_id, referral_code=new_code))
    logger.info("referral_completed", referrer_id=referral.referrer_id, referred_user_id=referred_user_id)
    return CompletionResult(success=True, message="Referral completed!", referrals=updated, new_code=new_code)
