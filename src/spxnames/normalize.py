"""Conversion of arbitrary strings into asset name candidates."""

import re
from enum import Enum
from typing import Union

# Generated names longer than this get hard to read
MAX_GENERATED_LENGTH = 20

NON_WORD_RUN = re.compile(r"[^a-zA-Z0-9_]+")
UPPERCASE = re.compile(r"([A-Z])")
LEADING_NON_LETTERS = re.compile(r"^[^a-zA-Z]+")


class NameCase(str, Enum):
    """Case style of a generated name."""

    CAMEL = "camel"
    PASCAL = "pascal"


def _up_first(part: str) -> str:
    return part[0].upper() + part[1:]


def normalize_asset_name(source: str, case: Union[NameCase, str]) -> str:
    """Convert any string to a valid asset name.

    Only ASCII letters, digits and underscores survive, so non-Latin input
    (CJK included) normalizes to an empty string.

    Args:
        source: Arbitrary input, such as an imported file name.
        case: "camel" or "pascal".

    Returns:
        The normalized name (max 20 characters), possibly empty.
    """
    case = NameCase(case)

    src = NON_WORD_RUN.sub("_", source)
    src = UPPERCASE.sub(r"_\1", src)
    src = src.lower()
    src = LEADING_NON_LETTERS.sub("", src)

    parts = [p for p in src.split("_") if p]
    if not parts:
        return ""

    first, *others = parts
    if case is NameCase.PASCAL:
        first = _up_first(first)
    result = first + "".join(_up_first(p) for p in others)

    return result[:MAX_GENERATED_LENGTH]
