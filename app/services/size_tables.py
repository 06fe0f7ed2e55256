"""Static US/UK/EU size correspondence tables.

Every chart is a tuple of ``SizeRow`` ordered from the smallest to the largest
physical size. Inside one chart no column repeats a value, so a lookup on any
column finds at most one row and a conversion there and back is exact.
"""
from typing import Literal, NamedTuple, Tuple, List


SizeSystem = Literal["US", "UK", "EU"]
Gender = Literal["men", "women"]
GarmentClass = Literal["shoes", "tops", "bottoms", "dresses"]

SIZE_SYSTEMS: Tuple[str, ...] = ("US", "UK", "EU")
GENDERS: Tuple[str, ...] = ("men", "women")
GARMENT_CLASSES: Tuple[str, ...] = ("shoes", "tops", "bottoms", "dresses")


class SizeRow(NamedTuple):
    US: str
    UK: str
    EU: str


class LetterSize(NamedTuple):
    letter: str
    us_numeric: Tuple[str, ...]


WOMEN_SHOES: Tuple[SizeRow, ...] = (
    SizeRow("5", "2.5", "35"),
    SizeRow("5.5", "3", "35.5"),
    SizeRow("6", "3.5", "36"),
    SizeRow("6.5", "4", "36.5"),
    SizeRow("7", "4.5", "37"),
    SizeRow("7.5", "5", "37.5"),
    SizeRow("8", "5.5", "38"),
    SizeRow("8.5", "6", "38.5"),
    SizeRow("9", "6.5", "39"),
    SizeRow("9.5", "7", "39.5"),
    SizeRow("10", "7.5", "40"),
    SizeRow("10.5", "8", "40.5"),
    SizeRow("11", "8.5", "41"),
    SizeRow("11.5", "9", "41.5"),
    SizeRow("12", "9.5", "42"),
)

MEN_SHOES: Tuple[SizeRow, ...] = (
    SizeRow("6", "5.5", "39"),
    SizeRow("6.5", "6", "39.5"),
    SizeRow("7", "6.5", "40"),
    SizeRow("7.5", "7", "40.5"),
    SizeRow("8", "7.5", "41"),
    SizeRow("8.5", "8", "41.5"),
    SizeRow("9", "8.5", "42"),
    SizeRow("9.5", "9", "42.5"),
    SizeRow("10", "9.5", "43"),
    SizeRow("10.5", "10", "43.5"),
    SizeRow("11", "10.5", "44"),
    SizeRow("11.5", "11", "44.5"),
    SizeRow("12", "11.5", "45"),
    SizeRow("12.5", "12", "45.5"),
    SizeRow("13", "12.5", "46"),
    SizeRow("14", "13.5", "47"),
    SizeRow("15", "14.5", "48"),
)

# Women's tops and general clothing, US numeric sizes
WOMEN_TOPS: Tuple[SizeRow, ...] = (
    SizeRow("0", "4", "32"),
    SizeRow("2", "6", "34"),
    SizeRow("4", "8", "36"),
    SizeRow("6", "10", "38"),
    SizeRow("8", "12", "40"),
    SizeRow("10", "14", "42"),
    SizeRow("12", "16", "44"),
    SizeRow("14", "18", "46"),
    SizeRow("16", "20", "48"),
    SizeRow("18", "22", "50"),
    SizeRow("20", "24", "52"),
)

# Men's tops use US letter sizes; UK is chest in inches. M sits at 36/46,
# so S falls between XS and M.
MEN_TOPS: Tuple[SizeRow, ...] = (
    SizeRow("XS", "34", "44"),
    SizeRow("S", "35", "45"),
    SizeRow("M", "36", "46"),
    SizeRow("L", "42-44", "52-54"),
    SizeRow("XL", "46", "56"),
    SizeRow("XXL", "48", "58"),
)

# Waist sizes. Only rows whose UK and EU values are unique are kept.
WOMEN_BOTTOMS: Tuple[SizeRow, ...] = (
    SizeRow("24", "6", "32"),
    SizeRow("26", "8", "36"),
    SizeRow("28", "10", "38"),
    SizeRow("30", "12", "40"),
    SizeRow("32", "14", "44"),
    SizeRow("33", "16", "46"),
    SizeRow("34", "18", "48"),
)

MEN_BOTTOMS: Tuple[SizeRow, ...] = (
    SizeRow("28", "28", "44"),
    SizeRow("30", "30", "46"),
    SizeRow("32", "32", "48"),
    SizeRow("34", "34", "50"),
    SizeRow("36", "36", "52"),
    SizeRow("38", "38", "54"),
    SizeRow("40", "40", "56"),
)

WOMEN_DRESSES: Tuple[SizeRow, ...] = (
    SizeRow("0", "4", "30"),
    SizeRow("2", "6", "32"),
    SizeRow("4", "8", "34"),
    SizeRow("6", "10", "36"),
    SizeRow("8", "12", "38"),
    SizeRow("10", "14", "40"),
    SizeRow("12", "16", "42"),
    SizeRow("14", "18", "44"),
    SizeRow("16", "20", "46"),
    SizeRow("18", "22", "48"),
)

# XXS and XS both hold "0"; lookups take the first bucket.
WOMEN_LETTER_SIZES: Tuple[LetterSize, ...] = (
    LetterSize("XXS", ("0",)),
    LetterSize("XS", ("0", "2")),
    LetterSize("S", ("4", "6")),
    LetterSize("M", ("8", "10")),
    LetterSize("L", ("12", "14")),
    LetterSize("XL", ("16", "18")),
    LetterSize("XXL", ("20",)),
)


def get_size_chart(gender: Gender, garment_class: GarmentClass) -> Tuple[SizeRow, ...]:
    """Return the chart for a (gender, garment class) pair.

    Men have no dress sizing, so (men, dresses) is an empty chart rather than
    an error. Anything outside the two enumerations is a caller bug.
    """
    match (gender, garment_class):
        case ("women", "shoes"):
            return WOMEN_SHOES
        case ("women", "tops"):
            return WOMEN_TOPS
        case ("women", "bottoms"):
            return WOMEN_BOTTOMS
        case ("women", "dresses"):
            return WOMEN_DRESSES
        case ("men", "shoes"):
            return MEN_SHOES
        case ("men", "tops"):
            return MEN_TOPS
        case ("men", "bottoms"):
            return MEN_BOTTOMS
        case ("men", "dresses"):
            return ()
    raise ValueError(f"Unknown size chart: {gender}/{garment_class}")


def chart_keys() -> List[Tuple[str, str]]:
    return [(g, c) for g in GENDERS for c in GARMENT_CLASSES]
