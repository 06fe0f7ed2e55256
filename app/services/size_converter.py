from typing import Optional, Tuple

from .size_tables import (
    WOMEN_LETTER_SIZES,
    GarmentClass,
    Gender,
    SizeRow,
    SizeSystem,
    get_size_chart,
)


# Sizes are compared as opaque strings: "6" and "6.0" are different keys and
# surrounding whitespace is not stripped. Only letter case is ignored.


def find_matching_sizes(size: str, from_system: SizeSystem, gender: Gender, garment_class: GarmentClass) -> Optional[SizeRow]:
    wanted = size.lower()
    for row in get_size_chart(gender, garment_class):
        if getattr(row, from_system).lower() == wanted:
            return row
    return None


def convert_size(
    size: str,
    from_system: SizeSystem,
    to_system: SizeSystem,
    gender: Gender,
    garment_class: GarmentClass,
) -> Optional[str]:
    row = find_matching_sizes(size, from_system, gender, garment_class)
    return getattr(row, to_system) if row else None


def get_letter_size(us_numeric: str) -> Optional[str]:
    """Letter bucket for a women's US numeric size, e.g. "8" -> "M"."""
    for mapping in WOMEN_LETTER_SIZES:
        if us_numeric in mapping.us_numeric:
            return mapping.letter
    return None


def get_numeric_from_letter(letter: str) -> Optional[Tuple[str, ...]]:
    wanted = letter.lower()
    for mapping in WOMEN_LETTER_SIZES:
        if mapping.letter.lower() == wanted:
            return mapping.us_numeric
    return None
