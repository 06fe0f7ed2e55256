from typing import Optional, List
from pydantic import BaseModel


class SizeRowOut(BaseModel):
    US: str
    UK: str
    EU: str


class SizeChartResponse(BaseModel):
    gender: str
    garment_class: str
    rows: List[SizeRowOut]


class MatchResponse(BaseModel):
    match: Optional[SizeRowOut] = None


class ConvertResponse(BaseModel):
    converted: Optional[str] = None


class LetterResponse(BaseModel):
    letter: Optional[str] = None


class NumericResponse(BaseModel):
    us_numeric: Optional[List[str]] = None
