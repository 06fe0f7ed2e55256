from typing import Optional, List
from pydantic import BaseModel, Field


class CandidateItem(BaseModel):
    id: Optional[str] = None
    brand: str
    garment_class: str
    gender: Optional[str] = None
    price: float


class ScoredCandidate(BaseModel):
    item: CandidateItem
    score: int


class SimilarRequest(BaseModel):
    reference: CandidateItem
    candidates: List[CandidateItem] = Field(default_factory=list)
    limit: Optional[int] = Field(None, ge=0)


class SimilarResponse(BaseModel):
    items: List[ScoredCandidate]
