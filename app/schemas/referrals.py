from typing import Optional, List, Literal
from pydantic import BaseModel, Field


class Referral(BaseModel):
    referrer_id: str
    referral_code: str
    status: Literal["pending", "completed"] = "pending"
    referred_user_id: Optional[str] = None


class ReferralList(BaseModel):
    referrals: List[Referral] = Field(default_factory=list)
    limit: Optional[int] = Field(None, ge=0)


class ReferralStats(BaseModel):
    referral_code: Optional[str] = None
    completed_referrals: int
    pending_referrals: int
    total_referrals: int


class LeaderboardEntry(BaseModel):
    rank: int
    user_id: str
    referral_count: int


class ValidateRequest(BaseModel):
    referrals: List[Referral] = Field(default_factory=list)
    code: str


class ReferralValidation(BaseModel):
    valid: bool
    message: Optional[str] = None
    referrer_id: Optional[str] = None


class CompleteRequest(BaseModel):
    referrals: List[Referral] = Field(default_factory=list)
    code: str
    referred_user_id: str


class CompletionResult(BaseModel):
    success: bool
    message: str
    referrals: List[Referral]
    new_code: Optional[str] = None
