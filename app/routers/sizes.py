from fastapi import APIRouter, Depends, Query

from ..security import verify_api_key
from ..services.size_tables import Gender, GarmentClass, SizeSystem, get_size_chart
from ..services.size_converter import (
    convert_size,
    find_matching_sizes,
    get_letter_size,
    get_numeric_from_letter,
)
from ..schemas.sizes import (
    ConvertResponse,
    LetterResponse,
    MatchResponse,
    NumericResponse,
    SizeChartResponse,
    SizeRowOut,
)


router = APIRouter(prefix="/sizes", tags=["sizes"], dependencies=[Depends(verify_api_key)])


@router.get("/charts/{gender}/{garment_class}")
async def size_chart(gender: Gender, garment_class: GarmentClass) -> SizeChartResponse:
    rows = [SizeRowOut(**row._asdict()) for row in get_size_chart(gender, garment_class)]
    return SizeChartResponse(gender=gender, garment_class=garment_class, rows=rows)


@router.get("/match")
async def match(
    size: str = Query(...),
    system: SizeSystem = Query(...),
    gender: Gender = Query(...),
    garment_class: GarmentClass = Query(...),
) -> MatchResponse:
    # No match is a normal empty result, not an error
    row = find_matching_sizes(size, system, gender, garment_class)
    return MatchResponse(match=SizeRowOut(**row._asdict()) if row else None)


@router.get("/convert")
async def convert(
    size: str = Query(...),
    from_system: SizeSystem = Query(...),
    to_system: SizeSystem = Query(...),
    gender: Gender = Query(...),
    garment_class: GarmentClass = Query(...),
) -> ConvertResponse:
    return ConvertResponse(converted=convert_size(size, from_system, to_system, gender, garment_class))


@router.get("/letter/{us_numeric}")
async def letter(us_numeric: str) -> LetterResponse:
    return LetterResponse(letter=get_letter_size(us_numeric))


@router.get("/numeric/{letter}")
async def numeric(letter: str) -> NumericResponse:
    values = get_numeric_from_letter(letter)
    return NumericResponse(us_numeric=list(values) if values is not None else None)
