"""Integer and enum value parsing for SKU attributes."""

from enum import IntEnum
from typing import Type, TypeVar

from tf2_sku.errors import InvalidValueError, ParseIntError
from tf2_sku.types.enums import IntErrorKind

E = TypeVar("E", bound=IntEnum)

ASCII_DIGITS = frozenset("0123456789")

U32_MAX = 2 ** 32 - 1
I32_MIN = -(2 ** 31)
I32_MAX = 2 ** 31 - 1


def _parse_int(field: str, value: str, signed: bool, minimum: int, maximum: int) -> int:
    # int() would accept whitespace, underscores and non-ASCII digits, so validate first
    if value == "":
        raise ParseIntError(field, IntErrorKind.EMPTY, value)

    digits = value
    negative = False
    if digits[0] == "+":
        digits = digits[1:]
    elif digits[0] == "-" and signed:
        negative = True
        digits = digits[1:]

    if digits == "" or any(ch not in ASCII_DIGITS for ch in digits):
        raise ParseIntError(field, IntErrorKind.INVALID_DIGIT, value)

    number = -int(digits) if negative else int(digits)

    if number > maximum:
        raise ParseIntError(field, IntErrorKind.POS_OVERFLOW, value)
    if number < minimum:
        raise ParseIntError(field, IntErrorKind.NEG_OVERFLOW, value)
    return number


def parse_u32(field: str, value: str) -> int:
    """Parse an unsigned 32-bit integer."""
    return _parse_int(field, value, False, 0, U32_MAX)


def parse_i32(field: str, value: str) -> int:
    """Parse a signed 32-bit integer."""
    return _parse_int(field, value, True, I32_MIN, I32_MAX)


def parse_enum_u32(enum_type: Type[E], field: str, value: str) -> E:
    """Parse an unsigned 32-bit integer and check it names a member of enum_type."""
    number = parse_u32(field, value)
    try:
        return enum_type(number)
    except ValueError:
        raise InvalidValueError(field, number) from None


def split_token(token: str) -> tuple[str, str]:
    """
    Split a token into its name and trailing numeric value.

    Only ASCII digits are peeled off the end, so a non-ASCII character next
    to the digits always ends the value, e.g. "kt-3" -> ("kt-", "3").
    """
    split_at = len(token)
    while split_at > 0 and token[split_at - 1] in ASCII_DIGITS:
        split_at -= 1
    return token[:split_at], token[split_at:]
